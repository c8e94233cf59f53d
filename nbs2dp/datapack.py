from dataclasses import dataclass
import os
from .differ import LayerDiffer, write_ticks
from .mappings import play_file, tick_dir
from .schedule import build_track, build_play_schedule, track_file
from .util import check_track_length, frames_per_tick, world_command


@dataclass(slots=True)
class ExportInfo:
	output: str
	fps: int
	schedule_length: int
	track_commands: int
	note_commands: int


def export(song, rig, ctx) -> ExportInfo:
	"""Writes the complete set of function files for a song into ctx.output.

	The track and play schedule are laid down first, then the song is walked once, appending note commands into the tick files the schedule created.
	Options are validated before any directory or file is created.
	"""
	world_cmd = world_command(ctx.world)
	track_length = check_track_length(ctx.track_length)
	fps = frames_per_tick(song.header.song_tempo)
	output = os.path.abspath(ctx.output)
	tick_directory = os.path.join(output, tick_dir)
	track_filename = track_file(output)
	print("Exporting datapack...")
	os.makedirs(os.path.dirname(track_filename), exist_ok=True)
	os.makedirs(tick_directory, exist_ok=True)

	tc = build_track(track_length, rig.track.start, rig.track.end, world_cmd, track_filename)
	sc = build_play_schedule(song.header.song_length, fps, track_length, ctx.namespace, world_cmd, os.path.join(output, play_file), tick_directory)
	differ = LayerDiffer(rig, song.header.layer_count, fps, track_length, world_cmd)
	nc = write_ticks(song, differ, tick_directory, progress=ctx.get("progress", True))
	return ExportInfo(output=output, fps=fps, schedule_length=sc, track_commands=tc, note_commands=nc)
