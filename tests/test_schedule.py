import pytest
from nbs2dp.mappings import file_header
from nbs2dp.schedule import track_commands, build_track, build_play_schedule, schedule_length, tick_file, track_file
from nbs2dp.util import Position, ConfigurationError
from conftest import W, commands


START = Position(0, 10, 5)
END = Position(4, 10, 7)


def test_short_track():
	assert list(track_commands(2, START, END, W)) == [
		f"{W} clone 0 11 5 4 11 7 0 10 5 replace normal",
		f"{W} fill 0 11 5 4 12 7 minecraft:air",
	]

def test_single_block_track():
	assert list(track_commands(1, START, END, W)) == [f"{W} fill 0 10 5 4 11 7 minecraft:air"]

@pytest.mark.parametrize("track_length", [1, 7, 50])
def test_track_command_count(track_length):
	lines = list(track_commands(track_length, START, END, W))
	assert sum(" clone " in line for line in lines) == track_length - 1
	assert lines[-1].endswith("minecraft:air")
	assert sum(" fill " in line for line in lines) == 1
	heights = [int(line.split()[6]) for line in lines[:-1]]
	assert heights == list(range(11, 10 + track_length))

@pytest.mark.parametrize("track_length", [0, -3])
def test_invalid_track_length(track_length):
	with pytest.raises(ConfigurationError):
		list(track_commands(track_length, START, END, W))

def test_build_track(tmp_path):
	fn = tmp_path / "move_track.mcfunction"
	assert build_track(5, START, END, W, str(fn)) == 5
	assert fn.read_text(encoding="utf-8").startswith(file_header)
	assert len(commands(fn)) == 5

def test_schedule_length():
	assert schedule_length(0, 1, 50) == 51
	assert schedule_length(100, 2, 50) == 251

def test_play_schedule(tmp_path):
	play = tmp_path / "play.mcfunction"
	count = build_play_schedule(3, 2, 4, "music", W, str(play), str(tmp_path))
	assert count == 11
	lines = commands(play)
	assert len(lines) == 11
	assert lines[0] == f"{W} function music:ticks/tick_0"
	for i, line in enumerate(lines[1:], 1):
		assert line == f"{W} schedule function music:ticks/tick_{i} {i}t append"

def test_play_schedule_tick_files(tmp_path):
	build_play_schedule(3, 2, 4, "songs", W, str(tmp_path / "play.mcfunction"), str(tmp_path))
	assert commands(tick_file(tmp_path, 0)) == []
	for i in range(1, 11):
		assert commands(tick_file(tmp_path, i)) == [f"{W} function songs:track/move_track"]
	assert not (tmp_path / "tick_11.mcfunction").exists()

def test_play_schedule_resets_stale_ticks(tmp_path):
	stale = tmp_path / "tick_2.mcfunction"
	stale.write_text("say stale\n", encoding="utf-8")
	build_play_schedule(1, 1, 2, "music", W, str(tmp_path / "play.mcfunction"), str(tmp_path))
	assert commands(stale) == [f"{W} function music:track/move_track"]

def test_track_file(tmp_path):
	assert track_file(str(tmp_path)) == str(tmp_path / "track" / "move_track.mcfunction")
