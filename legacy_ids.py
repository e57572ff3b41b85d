# legacy_ids.py
"""
Pre-1.13 numeric block IDs -> modern block type names.

Used by importer_legacy when a schematic carries no name mapping of its own.
An entry is either one name, or a tuple of variants picked by the metadata
value (masked, see _META_MASK). Names are unnamespaced, as stored on blocks.
"""

_COLORS = [
    "white", "orange", "magenta", "light_blue",
    "yellow", "lime", "pink", "gray",
    "light_gray", "cyan", "purple", "blue",
    "brown", "green", "red", "black",
]

_WOODS = ("oak", "spruce", "birch", "jungle", "acacia", "dark_oak")
_STONE_SLABS = (
    "smooth_stone_slab", "sandstone_slab", "petrified_oak_slab", "cobblestone_slab",
    "brick_slab", "stone_brick_slab", "nether_brick_slab", "quartz_slab",
)


def _colored(suffix):
    return tuple(f"{c}_{suffix}" for c in _COLORS)


LEGACY_BLOCKS = {
    0: "air",
    1: ("stone", "granite", "polished_granite", "diorite", "polished_diorite", "andesite", "polished_andesite"),
    2: "grass_block",
    3: ("dirt", "coarse_dirt", "podzol"),
    4: "cobblestone",
    5: tuple(f"{w}_planks" for w in _WOODS),
    6: tuple(f"{w}_sapling" for w in _WOODS),
    7: "bedrock",
    8: "water",
    9: "water",
    10: "lava",
    11: "lava",
    12: ("sand", "red_sand"),
    13: "gravel",
    14: "gold_ore",
    15: "iron_ore",
    16: "coal_ore",
    17: tuple(f"{w}_log" for w in _WOODS[:4]),
    18: tuple(f"{w}_leaves" for w in _WOODS[:4]),
    19: ("sponge", "wet_sponge"),
    20: "glass",
    21: "lapis_ore",
    22: "lapis_block",
    23: "dispenser",
    24: ("sandstone", "chiseled_sandstone", "cut_sandstone"),
    25: "note_block",
    26: "red_bed",
    27: "powered_rail",
    28: "detector_rail",
    29: "sticky_piston",
    30: "cobweb",
    31: ("dead_bush", "short_grass", "fern"),
    32: "dead_bush",
    33: "piston",
    34: "piston_head",
    35: _colored("wool"),
    36: "moving_piston",
    37: "dandelion",
    38: (
        "poppy", "blue_orchid", "allium", "azure_bluet", "red_tulip",
        "orange_tulip", "white_tulip", "pink_tulip", "oxeye_daisy",
    ),
    39: "brown_mushroom",
    40: "red_mushroom",
    41: "gold_block",
    42: "iron_block",
    43: _STONE_SLABS,
    44: _STONE_SLABS,
    45: "bricks",
    46: "tnt",
    47: "bookshelf",
    48: "mossy_cobblestone",
    49: "obsidian",
    50: "torch",
    51: "fire",
    52: "spawner",
    53: "oak_stairs",
    54: "chest",
    55: "redstone_wire",
    56: "diamond_ore",
    57: "diamond_block",
    58: "crafting_table",
    59: "wheat",
    60: "farmland",
    61: "furnace",
    62: "furnace",
    63: "oak_sign",
    64: "oak_door",
    65: "ladder",
    66: "rail",
    67: "cobblestone_stairs",
    68: "oak_wall_sign",
    69: "lever",
    70: "stone_pressure_plate",
    71: "iron_door",
    72: "oak_pressure_plate",
    73: "redstone_ore",
    74: "redstone_ore",
    75: "redstone_torch",
    76: "redstone_torch",
    77: "stone_button",
    78: "snow",
    79: "ice",
    80: "snow_block",
    81: "cactus",
    82: "clay",
    83: "sugar_cane",
    84: "jukebox",
    85: "oak_fence",
    86: "carved_pumpkin",
    87: "netherrack",
    88: "soul_sand",
    89: "glowstone",
    90: "nether_portal",
    91: "jack_o_lantern",
    92: "cake",
    93: "repeater",
    94: "repeater",
    95: _colored("stained_glass"),
    96: "oak_trapdoor",
    97: (
        "infested_stone", "infested_cobblestone", "infested_stone_bricks",
        "infested_mossy_stone_bricks", "infested_cracked_stone_bricks", "infested_chiseled_stone_bricks",
    ),
    98: ("stone_bricks", "mossy_stone_bricks", "cracked_stone_bricks", "chiseled_stone_bricks"),
    99: "brown_mushroom_block",
    100: "red_mushroom_block",
    101: "iron_bars",
    102: "glass_pane",
    103: "melon",
    104: "pumpkin_stem",
    105: "melon_stem",
    106: "vine",
    107: "oak_fence_gate",
    108: "brick_stairs",
    109: "stone_brick_stairs",
    110: "mycelium",
    111: "lily_pad",
    112: "nether_bricks",
    113: "nether_brick_fence",
    114: "nether_brick_stairs",
    115: "nether_wart",
    116: "enchanting_table",
    117: "brewing_stand",
    118: "cauldron",
    119: "end_portal",
    120: "end_portal_frame",
    121: "end_stone",
    122: "dragon_egg",
    123: "redstone_lamp",
    124: "redstone_lamp",
    125: tuple(f"{w}_slab" for w in _WOODS),
    126: tuple(f"{w}_slab" for w in _WOODS),
    127: "cocoa",
    128: "sandstone_stairs",
    129: "emerald_ore",
    130: "ender_chest",
    131: "tripwire_hook",
    132: "tripwire",
    133: "emerald_block",
    134: "spruce_stairs",
    135: "birch_stairs",
    136: "jungle_stairs",
    137: "command_block",
    138: "beacon",
    139: ("cobblestone_wall", "mossy_cobblestone_wall"),
    140: "flower_pot",
    141: "carrots",
    142: "potatoes",
    143: "oak_button",
    144: "skeleton_skull",
    145: "anvil",
    146: "trapped_chest",
    147: "light_weighted_pressure_plate",
    148: "heavy_weighted_pressure_plate",
    149: "comparator",
    150: "comparator",
    151: "daylight_detector",
    152: "redstone_block",
    153: "nether_quartz_ore",
    154: "hopper",
    155: ("quartz_block", "chiseled_quartz_block", "quartz_pillar", "quartz_pillar", "quartz_pillar"),
    156: "quartz_stairs",
    157: "activator_rail",
    158: "dropper",
    159: _colored("terracotta"),
    160: _colored("stained_glass_pane"),
    161: ("acacia_leaves", "dark_oak_leaves"),
    162: ("acacia_log", "dark_oak_log"),
    163: "acacia_stairs",
    164: "dark_oak_stairs",
    165: "slime_block",
    166: "barrier",
    167: "iron_trapdoor",
    168: ("prismarine", "prismarine_bricks", "dark_prismarine"),
    169: "sea_lantern",
    170: "hay_block",
    171: _colored("carpet"),
    172: "terracotta",
    173: "coal_block",
    174: "packed_ice",
    175: ("sunflower", "lilac", "tall_grass", "large_fern", "rose_bush", "peony"),
    176: "white_banner",
    177: "white_wall_banner",
    178: "daylight_detector",
    179: ("red_sandstone", "chiseled_red_sandstone", "cut_red_sandstone"),
    180: "red_sandstone_stairs",
    181: "red_sandstone_slab",
    182: "red_sandstone_slab",
    183: "spruce_fence_gate",
    184: "birch_fence_gate",
    185: "jungle_fence_gate",
    186: "dark_oak_fence_gate",
    187: "acacia_fence_gate",
    188: "spruce_fence",
    189: "birch_fence",
    190: "jungle_fence",
    191: "dark_oak_fence",
    192: "acacia_fence",
    193: "spruce_door",
    194: "birch_door",
    195: "jungle_door",
    196: "acacia_door",
    197: "dark_oak_door",
    198: "end_rod",
    199: "chorus_plant",
    200: "chorus_flower",
    201: "purpur_block",
    202: "purpur_pillar",
    203: "purpur_stairs",
    204: "purpur_slab",
    205: "purpur_slab",
    206: "end_stone_bricks",
    207: "beetroots",
    208: "dirt_path",
    209: "end_gateway",
    210: "repeating_command_block",
    211: "chain_command_block",
    212: "frosted_ice",
    213: "magma_block",
    214: "nether_wart_block",
    215: "red_nether_bricks",
    216: "bone_block",
    217: "structure_void",
    218: "observer",
    251: _colored("concrete"),
    252: _colored("concrete_powder"),
    255: "structure_block",
}
LEGACY_BLOCKS.update({219 + i: f"{c}_shulker_box" for i, c in enumerate(_COLORS)})
LEGACY_BLOCKS.update({235 + i: f"{c}_glazed_terracotta" for i, c in enumerate(_COLORS)})

# Bits of the metadata that select the variant; the rest encode
# orientation, growth stage, upper/lower half and so on.
_META_MASK = {
    6: 0x7,
    17: 0x3,
    18: 0x3,
    43: 0x7,
    44: 0x7,
    125: 0x7,
    126: 0x7,
    161: 0x1,
    162: 0x1,
    175: 0x7,
}


def lookup(block_id: int, meta: int = 0):
    """Return the modern type name for a legacy (id, metadata) pair, or None if the ID is unknown."""
    entry = LEGACY_BLOCKS.get(block_id)
    if entry is None or isinstance(entry, str):
        return entry
    variant = meta & _META_MASK.get(block_id, 0xF)
    # unused metadata values fall back to the default variant, as the game does
    return entry[variant] if variant < len(entry) else entry[0]
