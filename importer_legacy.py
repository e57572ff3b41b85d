# importer_legacy.py
"""
Import a classic MCEdit / Schematica "Alpha" .schematic tag tree.

Expected fields:
    Width, Height, Length   dimensions (x, y, z)
    Blocks                  one byte per cell, block ID (read unsigned)
    Data                    one byte per cell, metadata -> raw_state
    AddBlocks (optional)    4 extra high bits per block ID, two cells per byte
    SchematicaMapping / BlockIDs (optional)   the file's own ID -> name table

Cells are stored YZX (see importer_common). ID 0 is air and is skipped.
IDs the file does not name itself are resolved through legacy_ids.
"""

import numpy as np

import nbt_tree
from blueprint import PositionedBlock
from importer_common import finish_blueprint, linear_cells, name_palette, normalize_type, read_size
from legacy_ids import lookup as legacy_lookup
from schem_errors import MalformedTagTree, PaletteIndexOutOfRange


def _id_palette(tree):
    if nbt_tree.has(tree, "SchematicaMapping"):
        return name_palette(tree, "SchematicaMapping")

    palette = {}
    if nbt_tree.has(tree, "BlockIDs"):
        mapping = nbt_tree.compound(tree, "BlockIDs")
        for key in mapping:
            try:
                block_id = int(key)
            except ValueError:
                raise MalformedTagTree(f"BlockIDs: key {key!r} is not a numeric ID") from None
            palette[block_id] = normalize_type(nbt_tree.string(mapping, key))
    return palette


def _add_nibbles(add, count):
    # WorldEdit order: the first cell takes the high nibble of each byte
    nibbles = np.empty(len(add) * 2, dtype=np.int64)
    nibbles[0::2] = (add >> 4) & 0xF
    nibbles[1::2] = add & 0xF
    if len(nibbles) < count:
        raise MalformedTagTree(f"AddBlocks covers {len(nibbles)} cells, Blocks has {count}")
    return nibbles[:count]


def decode(tree, name, legacy_ids=legacy_lookup):
    size = read_size(tree)
    ids = nbt_tree.int_array(tree, "Blocks") & 0xFF
    meta = nbt_tree.int_array(tree, "Data") & 0xFF
    if len(meta) < len(ids):
        raise MalformedTagTree(f"Data has {len(meta)} entries, Blocks has {len(ids)}")
    if nbt_tree.has(tree, "AddBlocks"):
        ids = ids | (_add_nibbles(nbt_tree.int_array(tree, "AddBlocks") & 0xFF, len(ids)) << 8)

    palette = _id_palette(tree)
    blocks = []
    for i, x, y, z, block_id in linear_cells(ids, size):
        if block_id == 0:
            continue
        data = int(meta[i])
        block_type = palette.get(block_id) or legacy_ids(block_id, data)
        if block_type is None:
            raise PaletteIndexOutOfRange(f"block ID {block_id} (data {data}) at {(x, y, z)} has no name")
        blocks.append(PositionedBlock(x, y, z, block_type, data))

    return finish_blueprint(name, size, blocks, "legacy schematic")
