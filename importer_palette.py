# importer_palette.py
"""
Import a palette-based .schematic / .nbt tag tree.

    Width, Height, Length   dimensions (x, y, z)
    Palette                 compound, "minecraft:name" -> index
    BlockData               varint index per cell (WorldEdit), or
    Blocks                  one unsigned byte per cell when BlockData is absent

Index 0 is air and is skipped. The format carries no per-block orientation,
so raw_state is always 0.
"""

import nbt_tree
from blueprint import PositionedBlock
from importer_common import cell_indices, finish_blueprint, linear_cells, name_palette, palette_lookup, read_size


def decode(tree, name):
    size = read_size(tree)
    palette = name_palette(tree, "Palette")
    if nbt_tree.has(tree, "BlockData"):
        cells = cell_indices(tree, "BlockData")
    else:
        cells = nbt_tree.int_array(tree, "Blocks") & 0xFF

    blocks = []
    for _, x, y, z, index in linear_cells(cells, size):
        if index == 0:
            continue
        blocks.append(PositionedBlock(x, y, z, palette_lookup(palette, index, (x, y, z))))

    return finish_blueprint(name, size, blocks, "palette schematic")
