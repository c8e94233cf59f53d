from dataclasses import dataclass, field
from .util import round_min


@dataclass(slots=True, frozen=True)
class SongHeader:
	song_length: int
	song_tempo: float
	layer_count: int

@dataclass(slots=True, frozen=True)
class LayerEvent:
	layer: int
	key: int
	instrument: int

@dataclass(slots=True)
class TickRecord:
	tick: int
	layers: list = field(default_factory=list)


class Song:
	"""A decoded song: its header, plus its non-empty ticks in ascending order.

	The ticks may only be iterated once; they are typically produced lazily from the decoder.
	"""

	def __init__(self, header, ticks):
		self.header = header
		self._ticks = ticks
		self._consumed = False

	def __iter__(self):
		if self._consumed:
			raise RuntimeError("Song ticks have already been consumed.")
		self._consumed = True
		last = -1
		for record in self._ticks:
			if record.tick <= last:
				raise ValueError(f"Tick {record.tick} is out of order (previous tick was {last}).")
			last = record.tick
			yield record

	@classmethod
	def from_events(cls, header, events):
		"Builds a song from a mapping of tick to a list of (layer, key, instrument) triples."
		ticks = (TickRecord(tick, [LayerEvent(*e) for e in chord]) for tick, chord in sorted(events.items()) if chord)
		return cls(header, ticks)


def read_ticks(nbs):
	for tick, chord in nbs:
		if not chord:
			continue
		yield TickRecord(tick, [LayerEvent(note.layer, note.key, note.instrument) for note in chord])

def load_nbs(file) -> Song:
	print("Importing NBS...")
	import pynbs
	nbs = pynbs.read(str(file))
	# Files before version 3 do not store the song length
	song_length = nbs.header.song_length
	if nbs.notes:
		song_length = max(song_length, nbs.notes[-1].tick)
	header = SongHeader(
		song_length=song_length,
		song_tempo=round_min(nbs.header.tempo),
		layer_count=nbs.header.song_layers,
	)
	return Song(header, read_ticks(nbs))
