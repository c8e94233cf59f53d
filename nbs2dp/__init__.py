from .util import (
	__version__ as __version__,
	ConversionError as ConversionError,
	ConfigurationError as ConfigurationError,
	NoteRangeError as NoteRangeError,
	MappingError as MappingError,
	Position as Position,
	world_command, check_track_length, frames_per_tick,
)


class ContextArgs:
	def get(self, k, default=None):
		return getattr(self, k, default)

def fix_args(ctx) -> ContextArgs:
	if ctx.get("namespace") is None:
		ctx.namespace = "music"
	if ctx.get("output") is None:
		ctx.output = "output"
	if ctx.get("track_length") is None:
		ctx.track_length = 50
	if ctx.get("world") is None:
		ctx.world = "world"
	if ctx.get("progress") is None:
		ctx.progress = True
	return ctx

def convert_file(ctx):
	# Fail on bad options before touching any file
	world_command(ctx.world)
	check_track_length(ctx.track_length)
	from . import song, rig, datapack
	data = song.load_nbs(ctx.input)
	fps = frames_per_tick(data.header.song_tempo)
	print(f"Song length: {data.header.song_length} ticks, tempo: {data.header.song_tempo}, layers: {data.header.layer_count}, frames per tick: {fps}")
	mappings = rig.load_rig(ctx.mapping)
	info = datapack.export(data, mappings, ctx=ctx)
	print("Schedule length:", info.schedule_length)
	print("Final command count:", info.note_commands)
	return info

def convert(**kwargs):
	"""Converts an NBS song into datapack function files.

	Accepts the same options as the command line (input, mapping, namespace, output, track_length, world, progress) and returns the export info.
	"""
	ctx = ContextArgs()
	ctx.__dict__.update(kwargs)
	ctx = fix_args(ctx)
	return convert_file(ctx)
