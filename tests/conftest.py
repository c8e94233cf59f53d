import pytest
from nbs2dp.mappings import file_header
from nbs2dp.rig import parse_rig, roles


W = "execute in minecraft:overworld run"


def rig_data(layers=2):
	"""Mappings document with one slot per layer per role.

	Role k (in rig.roles order) sits at y = 100 * (k + 1), and layer n at x = n, so slot positions are unique and easy to spot in output.
	"""
	data = {
		role: {"slots": {str(i): {"x": i, "y": 100 * (k + 1), "z": 0} for i in range(layers)}}
		for k, role in enumerate(roles)
	}
	data["particles"].update(type="minecraft:note", delta="0.1 0.1 0.1", speed=1, amount=3)
	data["track"] = {"start": {"x": 0, "y": 10, "z": 5}, "end": {"x": 4, "y": 10, "z": 7}}
	return data

def commands(path):
	with open(path, encoding="utf-8") as f:
		return [line for line in f.read().splitlines() if line and not line.startswith("#")]

def header_count(path):
	with open(path, encoding="utf-8") as f:
		return f.read().count(file_header)


def write_nbs(path, notes, layers=3, tempo=10, version=None):
	"Writes an NBS file from (tick, layer, key, instrument) tuples, given in tick then layer order."
	import pynbs
	nbs = pynbs.new_file(song_name="test", tempo=tempo)
	nbs.layers[:] = [pynbs.Layer(id=i) for i in range(layers)]
	nbs.notes.extend(pynbs.Note(tick=t, layer=layer, key=key, instrument=ins) for t, layer, key, ins in notes)
	if version is None:
		nbs.save(str(path))
	else:
		nbs.save(str(path), version=version)
	return path


@pytest.fixture
def rig():
	return parse_rig(rig_data())
