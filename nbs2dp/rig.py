"""Loader for the rig mappings document.

The document assigns every layer of the song a set of in-world coordinates, one per role, plus the particle settings and the start/end corners of the animation track.
It is read with json5, so comments and trailing commas are allowed.
"""

from dataclasses import dataclass, field
from .util import Position, MappingError


roles = ("noteblocks", "instruments", "colors", "particles", "redstone", "spawn")


@dataclass(slots=True)
class SlotMap:
	role: str
	slots: dict

	def __getitem__(self, slot) -> Position:
		try:
			return self.slots[slot]
		except KeyError:
			raise MappingError(f"No {self.role} slot mapped for layer {slot}.") from None

@dataclass(slots=True)
class ParticleSettings:
	type: str
	delta: str
	speed: float
	amount: int

@dataclass(slots=True)
class Track:
	start: Position
	end: Position

@dataclass(slots=True)
class Rig:
	noteblocks: SlotMap
	instruments: SlotMap
	colors: SlotMap
	particles: SlotMap
	redstone: SlotMap
	spawn: SlotMap
	particle: ParticleSettings
	track: Track
	blocks: dict = field(default_factory=dict)
	glass: dict = field(default_factory=dict)


def parse_position(data, where) -> Position:
	try:
		return Position(*(int(data[k]) for k in "xyz"))
	except (KeyError, TypeError, ValueError):
		raise MappingError(f"Invalid position at {where}: {data!r}") from None

def parse_slots(data, role) -> SlotMap:
	try:
		slots = data[role]["slots"]
	except (KeyError, TypeError):
		raise MappingError(f"Mappings are missing {role}.slots") from None
	parsed = {}
	for k, v in slots.items():
		try:
			slot = int(k)
		except ValueError:
			raise MappingError(f"Invalid {role} slot id: {k!r}") from None
		parsed[slot] = parse_position(v, f"{role}.slots.{k}")
	return SlotMap(role, parsed)

def parse_overrides(data, key) -> dict:
	table = data.get(key) or {}
	try:
		return {int(k): str(v) for k, v in table.items()}
	except (AttributeError, ValueError):
		raise MappingError(f"Invalid {key} table: {table!r}") from None

def parse_rig(data) -> Rig:
	slot_maps = {role: parse_slots(data, role) for role in roles}
	particles = data["particles"]
	try:
		particle = ParticleSettings(
			type=str(particles["type"]),
			delta=str(particles["delta"]),
			speed=particles["speed"],
			amount=particles["amount"],
		)
	except KeyError as ex:
		raise MappingError(f"Mappings are missing particles.{ex.args[0]}") from None
	try:
		track = data["track"]
		start, end = track["start"], track["end"]
	except (KeyError, TypeError):
		raise MappingError("Mappings are missing track.start or track.end") from None
	return Rig(
		**slot_maps,
		particle=particle,
		track=Track(parse_position(start, "track.start"), parse_position(end, "track.end")),
		blocks=parse_overrides(data, "blocks"),
		glass=parse_overrides(data, "glass"),
	)

def load_rig(path) -> Rig:
	import json5
	with open(path, "r", encoding="utf-8") as f:
		data = json5.load(f)
	return parse_rig(data)
