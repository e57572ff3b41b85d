# importer_litematic.py
"""
Import a Litematica .litematic tag tree (already decompressed).

Only the first region is read; any further regions are ignored.

    Regions: {<name>: {Size, BlockStatePalette: [{Name}, ...], BlockStates}, ...}

Size is either an {x, y, z} compound (as Litematica writes it; negative when the
selection was made backwards) or a plain 3-element list. BlockStates is either
Litematica's bit-packed long array or a flat list of palette indices. Cells are
YZX ordered and none are skipped, air included.
"""

import logging

import numpy as np

import nbt_tree
from blueprint import PositionedBlock, Size
from importer_common import finish_blueprint, linear_cells, normalize_type, palette_lookup
from nbt_tree import TagKind
from schem_errors import MalformedTagTree

logger = logging.getLogger(__name__)

_U64 = (1 << 64) - 1


def unpack_block_states(words, palette_size, volume):
    """
    Unpack Litematica's bit array: every entry takes max(2, bits for the largest
    palette index) bits, packed back to back, and may straddle two longs.
    """
    bits = max(2, (palette_size - 1).bit_length())
    mask = (1 << bits) - 1
    unsigned = [int(w) & _U64 for w in np.asarray(words, dtype=np.int64).tolist()]
    needed = (volume * bits + 63) // 64
    if len(unsigned) < needed:
        raise MalformedTagTree(f"BlockStates has {len(unsigned)} longs, {volume} cells need {needed}")

    values = []
    for i in range(volume):
        word, offset = divmod(i * bits, 64)
        value = unsigned[word] >> offset
        if offset + bits > 64:
            value |= unsigned[word + 1] << (64 - offset)
        values.append(value & mask)
    return np.array(values, dtype=np.int64)


def _first_region(tree):
    regions = nbt_tree.compound(tree, "Regions")
    if not regions:
        raise MalformedTagTree("Regions is empty")
    region_name = next(iter(regions))
    if len(regions) > 1:
        logger.debug("reading region %r, ignoring %d more", region_name, len(regions) - 1)
    return nbt_tree.compound(regions, region_name)


def decode(tree, name):
    region = _first_region(tree)
    size = Size(*(abs(v) for v in nbt_tree.xyz(region, "Size")))
    palette = [
        normalize_type(nbt_tree.string(entry, "Name"))
        for entry in nbt_tree.list_of(region, "BlockStatePalette", TagKind.COMPOUND)
    ]

    states = nbt_tree.field(region, "BlockStates")
    if nbt_tree.kind_of(states) is TagKind.INT_ARRAY and states.dtype.itemsize == 8:
        cells = unpack_block_states(states, len(palette), size.x * size.y * size.z)
    else:
        cells = nbt_tree.to_int_array(states, "BlockStates")

    blocks = [
        PositionedBlock(x, y, z, palette_lookup(palette, index, (x, y, z)))
        for _, x, y, z, index in linear_cells(cells, size)
    ]
    return finish_blueprint(name, size, blocks, "litematic region")
