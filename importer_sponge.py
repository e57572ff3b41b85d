# importer_sponge.py
"""
Import a Sponge .schem tag tree (already decompressed).

The schematic body sits under a "Schematic" container (version 3); a root that
already is the body (versions 1 and 2) is accepted as well.

    v2:  Width, Height, Length, Palette, BlockData
    v3:  Width, Height, Length, Blocks: {Palette, Data}

Unlike the other flat-array importers this one keeps index 0: every cell with a
palette entry becomes a block, air included.
"""

import nbt_tree
from blueprint import PositionedBlock
from importer_common import cell_indices, finish_blueprint, linear_cells, name_palette, palette_lookup, read_size

CONTAINER_KEY = "Schematic"


def _palette_and_cells(body):
    if nbt_tree.has(body, "Blocks") and nbt_tree.kind_of(body["Blocks"]) is nbt_tree.TagKind.COMPOUND:
        holder = nbt_tree.compound(body, "Blocks")
        return name_palette(holder, "Palette"), cell_indices(holder, "Data")
    return name_palette(body, "Palette"), cell_indices(body, "BlockData")


def decode(tree, name):
    body = nbt_tree.compound(tree, CONTAINER_KEY) if nbt_tree.has(tree, CONTAINER_KEY) else tree
    size = read_size(body)
    palette, cells = _palette_and_cells(body)

    blocks = [
        PositionedBlock(x, y, z, palette_lookup(palette, index, (x, y, z)))
        for _, x, y, z, index in linear_cells(cells, size)
    ]
    return finish_blueprint(name, size, blocks, "sponge schematic")
