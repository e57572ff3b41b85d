# importer_common.py
"""
Helpers shared by the importer_* modules.

Flat cell arrays in every format use the same YZX layout:
    index = y * (width * length) + z * width + x
"""

import logging

import numpy as np

import nbt_tree
from blueprint import Blueprint, Size, validate_blocks
from schem_errors import MalformedTagTree, PaletteIndexOutOfRange, SizeInvariantViolation

logger = logging.getLogger(__name__)


def normalize_type(name) -> str:
    """'minecraft:Oak_Stairs[facing=east]' -> 'oak_stairs'"""
    base = str(name).strip().split("[", 1)[0]
    base = base.rsplit(":", 1)[-1].strip().lower()
    if not base:
        raise MalformedTagTree(f"empty block type in {name!r}")
    return base


def read_size(tree) -> Size:
    """Width / Height / Length fields -> Size(x, y, z)."""
    size = Size(nbt_tree.integer(tree, "Width"), nbt_tree.integer(tree, "Height"), nbt_tree.integer(tree, "Length"))
    if min(size) < 0:
        raise MalformedTagTree(f"negative size {tuple(size)}")
    return size


def name_palette(node, key="Palette") -> dict[int, str]:
    """Compound of namespaced name -> index, inverted to index -> normalized type."""
    palette = {}
    for name, value in nbt_tree.compound(node, key).items():
        index = nbt_tree.as_int(value, f"{key}[{name!r}]")
        if index in palette:
            raise MalformedTagTree(f"{key}: index {index} used by {palette[index]!r} and {name!r}")
        palette[index] = normalize_type(name)
    return palette


def decode_varints(data) -> np.ndarray:
    """WorldEdit BlockData: little-endian base-128 varints, 7 bits per byte."""
    values = []
    value = shift = 0
    for byte in np.asarray(data, dtype=np.int64).tolist():
        byte &= 0xFF
        value |= (byte & 0x7F) << shift
        if byte & 0x80:
            shift += 7
            if shift > 28:
                raise MalformedTagTree("varint longer than 5 bytes")
            continue
        values.append(value)
        value = shift = 0
    if shift:
        raise MalformedTagTree("cell array ends inside a varint")
    return np.array(values, dtype=np.int64)


def cell_indices(node, key) -> np.ndarray:
    """Palette indices per cell: a byte array is varint-encoded, wider arrays and lists are read as is."""
    value = nbt_tree.field(node, key)
    if nbt_tree.kind_of(value) is nbt_tree.TagKind.INT_ARRAY and value.dtype.itemsize == 1:
        return decode_varints(value)
    return nbt_tree.to_int_array(value, key)


def palette_lookup(palette, index, where):
    """palette is a dict (index -> entry) or a list; a negative index never wraps."""
    if index < 0:
        raise PaletteIndexOutOfRange(f"negative palette index {index} at {where}")
    try:
        return palette[index]
    except (KeyError, IndexError):
        raise PaletteIndexOutOfRange(f"palette index {index} at {where} has no entry") from None


def linear_cells(values, size: Size):
    """
    Yield (index, x, y, z, value) for every entry of a flat cell array, in array order.

    The array must hold exactly one entry per cell of `size`. Extra entries are
    rejected before anything is yielded, air and unmapped indices included.
    """
    w, h, l = size
    volume = w * h * l
    count = len(values)
    if count < volume:
        raise MalformedTagTree(f"cell array has {count} entries, {w}x{h}x{l} needs {volume}")
    if count > volume:
        raise SizeInvariantViolation(f"cell array has {count} entries, {w}x{h}x{l} holds only {volume}")
    if count == 0:
        return

    index = np.arange(count)
    x = index % w
    z = (index // w) % l
    y = index // (w * l)
    yield from zip(index.tolist(), x.tolist(), y.tolist(), z.tolist(), np.asarray(values).tolist())


def finish_blueprint(name, size, blocks, format_label) -> Blueprint:
    validate_blocks(blocks, size)
    blueprint = Blueprint(name, size, blocks)
    logger.debug(
        "%s: decoded %s, size %dx%dx%d, %d blocks, %d materials",
        name, format_label, *size, len(blueprint.blocks), len(blueprint.materials),
    )
    return blueprint
