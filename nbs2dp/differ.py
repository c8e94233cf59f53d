from dataclasses import dataclass
import tqdm
from .mappings import instrument_to_block, instrument_to_glass, octave_start, note_range
from .schedule import tick_file
from .util import NoteRangeError, MappingError, write_function


UNSET = -1

@dataclass(slots=True)
class LayerCache:
	last_instrument: int = UNSET
	# Raw NBS key; the translated pitch may legitimately be -1 (and must then raise)
	last_key: int = UNSET

def create_cache(layer_count) -> dict:
	return {i: LayerCache() for i in range(layer_count)}


class LayerDiffer:
	"""Turns note events into block updates, emitting only the changes since the last event on each layer.

	Music commands (pitch, instrument, particle, redstone) land track_length game ticks after the matching animation command, which is how long a spawned block takes to travel down the track.
	"""

	def __init__(self, rig, layer_count, fps, track_length, world_cmd):
		self.rig = rig
		self.fps = fps
		self.track_length = track_length
		self.world_cmd = world_cmd
		self.cache = create_cache(layer_count)
		self.blocks = dict(instrument_to_block)
		self.blocks.update(rig.blocks)
		self.glass = dict(instrument_to_glass)
		self.glass.update(rig.glass)
		self.warned = set()

	def derived_ticks(self, tick) -> tuple:
		animation_tick = self.fps * tick
		return animation_tick, animation_tick + self.track_length

	def warn_glass(self, instrument):
		if instrument in self.warned:
			return
		self.warned.add(instrument)
		print(f"WARNING: No instrument to glass mapping: {instrument}")

	def diff_event(self, event, music, animation, tick=None):
		w = self.world_cmd
		rig = self.rig
		slot = event.layer
		try:
			cache = self.cache[slot]
		except KeyError:
			raise MappingError(f"Layer {slot} is outside the song's {len(self.cache)} layers.") from None

		if event.key != cache.last_key:
			note = event.key - octave_start
			if note not in note_range:
				raise NoteRangeError(f"Key {event.key} on layer {slot} at tick {tick} is out of range (note {note}, expected {note_range.start}-{note_range.stop - 1}).")
			music.append(f"{w} setblock {rig.noteblocks[slot]} minecraft:note_block[note={note}] replace")
			cache.last_key = event.key

		glass = self.glass.get(event.instrument)
		if event.instrument != cache.last_instrument:
			try:
				block = self.blocks[event.instrument]
			except KeyError:
				raise MappingError(f"Unknown instrument: {event.instrument}") from None
			music.append(f"{w} setblock {rig.instruments[slot]} {block} replace")
			if glass:
				music.append(f"{w} setblock {rig.colors[slot]} {glass} replace")
			else:
				self.warn_glass(event.instrument)
			cache.last_instrument = event.instrument

		if glass:
			animation.append(f"{w} setblock {rig.spawn[slot]} {glass} replace")
		else:
			self.warn_glass(event.instrument)

		particle = rig.particle
		music.append(f"{w} particle {particle.type} {rig.particles[slot]} {particle.delta} {particle.speed} {particle.amount}")
		music.append(f"{w} setblock {rig.redstone[slot]} minecraft:redstone_block destroy")

	def diff_tick(self, record) -> tuple:
		"Returns the (music, animation) command lines for one tick record. Events are applied in order."
		music = []
		animation = []
		for event in record.layers:
			self.diff_event(event, music, animation, tick=record.tick)
		return music, animation

	def write_tick(self, record, tick_directory) -> int:
		music, animation = self.diff_tick(record)
		animation_tick, music_tick = self.derived_ticks(record.tick)
		write_function(tick_file(tick_directory, animation_tick), animation, mode="a")
		write_function(tick_file(tick_directory, music_tick), music, mode="a")
		return len(music) + len(animation)


def write_ticks(song, differ, tick_directory, progress=True) -> int:
	"Walks the song once, appending each tick's commands to its derived tick files. Returns the number of commands written."
	nc = 0
	with tqdm.tqdm(total=song.header.song_length + 1, unit="tick", disable=not progress) as bar:
		for record in song:
			nc += differ.write_tick(record, tick_directory)
			bar.update(record.tick + 1 - bar.n)
	return nc
