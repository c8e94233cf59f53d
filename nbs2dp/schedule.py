import os
from .mappings import track_dir, track_name, tick_dir
from .util import check_track_length, function_name, function_file, write_function


def track_commands(track_length, start, end, world_cmd):
	"""Yields the commands that advance the animation track by one block.

	Each layer of the track volume is cloned one block down, so running the function once per game tick scrolls the track towards start.y.
	The final fill clears the topmost layer, otherwise it would be copied down forever.
	"""
	check_track_length(track_length)
	for y in range(start.y + 1, start.y + track_length):
		yield f"{world_cmd} clone {start.x} {y} {start.z} {end.x} {y} {end.z} {start.x} {y - 1} {start.z} replace normal"
	top = start.y + track_length
	# Clears the full start.z..end.z span the clones cover, not just end.z
	yield f"{world_cmd} fill {start.x} {top - 1} {start.z} {end.x} {top} {end.z} minecraft:air"

def build_track(track_length, start, end, world_cmd, filename):
	lines = list(track_commands(track_length, start, end, world_cmd))
	write_function(filename, lines)
	return len(lines)

def schedule_length(song_length, fps, track_length) -> int:
	return fps * song_length + track_length + 1

def tick_function(namespace, i) -> str:
	return function_name(namespace, tick_dir, f"tick_{i}")

def tick_file(directory, i) -> str:
	return function_file(directory, f"tick_{i}")

def build_play_schedule(song_length, fps, track_length, namespace, world_cmd, play_file, tick_directory):
	"""Writes the play function, and creates every tick function it schedules.

	Tick 0 is called immediately and does not move the track; every later tick is scheduled relative to the moment the play function runs, appended to the schedule queue in ascending order.
	Each scheduled tick function starts out advancing the track; the differ appends notes to them afterwards.
	Returns the number of commands written to the play function.
	"""
	check_track_length(track_length)
	count = schedule_length(song_length, fps, track_length)
	advance = f"{world_cmd} function {function_name(namespace, track_dir, track_name)}"
	lines = [f"{world_cmd} function {tick_function(namespace, 0)}"]
	write_function(tick_file(tick_directory, 0), ())
	for i in range(1, count):
		lines.append(f"{world_cmd} schedule function {tick_function(namespace, i)} {i}t append")
		write_function(tick_file(tick_directory, i), (advance,))
	write_function(play_file, lines)
	return len(lines)

def track_file(directory) -> str:
	return function_file(os.path.join(directory, track_dir), track_name)
