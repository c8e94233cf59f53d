# Vanilla NBS instrument ids, in file order
nbs_names = {k: i for i, k in enumerate([
	"harp",
	"bass",
	"basedrum",
	"snare",
	"hat",
	"guitar",
	"flute",
	"bell",
	"chime",
	"xylophone",
	"iron_xylophone",
	"cow_bell",
	"didgeridoo",
	"bit",
	"banjo",
	"pling",
])}

# Block placed under a note block to select the instrument
instrument_blocks = dict(
	harp="minecraft:dirt",
	bass="minecraft:oak_planks",
	basedrum="minecraft:stone",
	snare="minecraft:sand",
	hat="minecraft:glass",
	guitar="minecraft:white_wool",
	flute="minecraft:clay",
	bell="minecraft:gold_block",
	chime="minecraft:packed_ice",
	xylophone="minecraft:bone_block",
	iron_xylophone="minecraft:iron_block",
	cow_bell="minecraft:soul_sand",
	didgeridoo="minecraft:pumpkin",
	bit="minecraft:emerald_block",
	banjo="minecraft:hay_block",
	pling="minecraft:glowstone",
)
# Laser/indicator colour per instrument
instrument_glass = dict(
	harp="minecraft:light_blue_stained_glass",
	bass="minecraft:brown_stained_glass",
	basedrum="minecraft:red_stained_glass",
	snare="minecraft:yellow_stained_glass",
	hat="minecraft:light_gray_stained_glass",
	guitar="minecraft:orange_stained_glass",
	flute="minecraft:white_stained_glass",
	bell="minecraft:magenta_stained_glass",
	chime="minecraft:cyan_stained_glass",
	xylophone="minecraft:pink_stained_glass",
	iron_xylophone="minecraft:gray_stained_glass",
	cow_bell="minecraft:black_stained_glass",
	didgeridoo="minecraft:green_stained_glass",
	bit="minecraft:lime_stained_glass",
	banjo="minecraft:purple_stained_glass",
	pling="minecraft:blue_stained_glass",
)
instrument_to_block = {nbs_names[k]: v for k, v in instrument_blocks.items()}
instrument_to_glass = {nbs_names[k]: v for k, v in instrument_glass.items()}

worlds = dict(
	end="minecraft:the_end",
	nether="minecraft:the_nether",
	world="minecraft:overworld",
)

# NBS key 33 (F#3) is note block pitch 0
octave_start = 33
note_range = range(0, 25)
# Game ticks per second; song ticks are stretched to a whole number of these
max_frames_per_second = 20

play_file = "play.mcfunction"
track_dir = "track"
track_name = "move_track"
tick_dir = "ticks"

file_header = """\
#####################################################################
# Generated by nbs2dp. Do not edit this file by hand; re-run the
# converter against the source song and mappings to regenerate it.
#####################################################################
"""
