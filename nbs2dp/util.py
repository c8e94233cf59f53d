from dataclasses import dataclass
import fractions
import os
from .mappings import worlds, max_frames_per_second, file_header


class ConversionError(Exception):
	"Base class for all fatal conversion errors."

class ConfigurationError(ConversionError, ValueError):
	"Invalid options; always raised before any output is written."

class NoteRangeError(ConversionError, ValueError):
	"A song key that a note block cannot play."

class MappingError(ConversionError, LookupError):
	"Unknown instrument, or a layer without a coordinate slot."


@dataclass(slots=True, frozen=True)
class Position:
	x: int
	y: int
	z: int

	def __str__(self):
		return f"{self.x} {self.y} {self.z}"


def round_min(x):
	try:
		y = int(x)
	except (ValueError, OverflowError, TypeError):
		return x
	if x == y:
		return y
	return x

def world_command(world) -> str:
	try:
		dimension = worlds[world]
	except KeyError:
		raise ConfigurationError(f"Invalid world: {world!r}, expected one of {', '.join(worlds)}.") from None
	return f"execute in {dimension} run"

def frames_per_tick(tempo) -> int:
	"""Number of game ticks each song tick lasts.

	Raises ConfigurationError unless the song's tempo (in ticks per second) divides evenly into the game's tick rate.
	"""
	if not tempo or tempo <= 0:
		raise ConfigurationError(f"Invalid tempo: {tempo}")
	# Exact arithmetic; decoded tempos are floats such as 0.8
	fps = fractions.Fraction(max_frames_per_second) / fractions.Fraction(str(tempo))
	if fps.denominator != 1:
		raise ConfigurationError(f"Tempo {round_min(tempo)} does not divide evenly into {max_frames_per_second} frames per second.")
	return int(fps)

def check_track_length(track_length) -> int:
	if not isinstance(track_length, int) or track_length <= 0:
		raise ConfigurationError(f"Track length must be a positive integer, got {track_length!r}.")
	return track_length

def function_name(namespace, *parts) -> str:
	return f"{namespace}:" + "/".join(parts)

def function_file(directory, name) -> str:
	return os.path.join(directory, f"{name}.mcfunction")

def write_function(path, lines, mode="w"):
	"""Writes command lines to a function file, prefixed with the generated-file header if the file is new.

	Use mode="a" to append to a function file another writer has already created.
	"""
	fresh = mode == "w" or not os.path.exists(path)
	with open(path, mode, encoding="utf-8") as f:
		if fresh:
			f.write(file_header)
		f.writelines(line + "\n" for line in lines)


try:
	from importlib.metadata import version
	__version__ = version("nbs2dp")
except Exception:
	__version__ = "0.0.0-unknown"

def get_parser():
	import argparse
	parser = argparse.ArgumentParser(
		prog="nbs2dp",
		description="Note Block Studio to Minecraft datapack converter",
		epilog="Usage: nbs2dp -i [fileName.nbs] -m [mappings.json]",
	)
	parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
	parser.add_argument("-i", "--input", help="Input NBS file (.nbs)", required=True)
	parser.add_argument("-m", "--mapping", help="File to load rig coordinate mappings from (.json | .json5)", required=True)
	parser.add_argument("-n", "--namespace", default="music", help='Minecraft datapack namespace to execute commands from. Defaults to "music"')
	parser.add_argument("-o", "--output", default="output", help='Output folder location; should be the namespace\'s functions folder. Defaults to "output"')
	parser.add_argument("-t", "--track-length", type=int, default=50, help="Length of the animated track, in blocks. Music starts this many game ticks after the animation. Defaults to 50")
	parser.add_argument("-w", "--world", choices=tuple(worlds), default="world", help='World to execute commands in. Defaults to "world"')
	parser.add_argument("--progress", action=argparse.BooleanOptionalAction, default=True, help="Displays a progress bar while writing tick files. Defaults to TRUE")
	return parser
