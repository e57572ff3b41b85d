# nbt_tree.py
"""
Typed access to an NBT tag tree.

nbtlib does the byte-level parsing. Decoders never index the parsed tree
directly; they go through the accessors below, which classify every node into
one of a small set of kinds (compound, list, int array, string, primitive) and
raise MalformedTagTree on a missing field or a node of the wrong kind instead of
handing back something half-usable.

The accessors only rely on the Python base types nbtlib tags derive from
(dict, list, str, int, numpy.ndarray), so plain Python trees work as well.
"""

import struct
from collections.abc import Mapping
from enum import Enum
from io import BytesIO

import nbtlib
import numpy as np

from schem_errors import MalformedTagTree


class TagKind(Enum):
    COMPOUND = "compound"
    LIST = "list"
    INT_ARRAY = "int_array"  # byte / int / long arrays
    STRING = "string"
    PRIMITIVE = "primitive"  # byte, short, int, long, float, double


def parse_tag_tree(data: bytes) -> nbtlib.File:
    """Parse uncompressed NBT bytes into the root compound."""
    try:
        return nbtlib.File.parse(BytesIO(data))
    except (struct.error, EOFError, ValueError, TypeError, KeyError, IndexError) as err:
        raise MalformedTagTree(f"not a valid NBT document: {err}") from err


def kind_of(node) -> TagKind:
    if isinstance(node, Mapping):
        return TagKind.COMPOUND
    if isinstance(node, np.ndarray):
        return TagKind.INT_ARRAY
    if isinstance(node, str):
        return TagKind.STRING
    if isinstance(node, list):
        return TagKind.LIST
    if isinstance(node, (int, float, np.integer, np.floating)) and not isinstance(node, bool):
        return TagKind.PRIMITIVE
    raise MalformedTagTree(f"unsupported tag node {type(node).__name__}")


def _expect(node, kind: TagKind, what: str):
    actual = kind_of(node)
    if actual is not kind:
        raise MalformedTagTree(f"{what}: expected {kind.value}, got {actual.value}")
    return node


def has(node, key: str) -> bool:
    return kind_of(node) is TagKind.COMPOUND and key in node


def field(node, key: str):
    _expect(node, TagKind.COMPOUND, f"parent of {key!r}")
    try:
        return node[key]
    except KeyError:
        raise MalformedTagTree(f"missing field {key!r}") from None


def compound(node, key: str) -> Mapping:
    return _expect(field(node, key), TagKind.COMPOUND, key)


def list_of(node, key: str, kind: TagKind | None = None) -> list:
    value = _expect(field(node, key), TagKind.LIST, key)
    if kind is not None:
        for i, item in enumerate(value):
            _expect(item, kind, f"{key}[{i}]")
    return value


def string(node, key: str) -> str:
    return str(_expect(field(node, key), TagKind.STRING, key))


def as_int(value, what: str) -> int:
    _expect(value, TagKind.PRIMITIVE, what)
    if isinstance(value, (float, np.floating)):
        raise MalformedTagTree(f"{what}: expected an integer, got {value!r}")
    return int(value)


def integer(node, key: str) -> int:
    return as_int(field(node, key), key)


def to_int_array(value, what: str) -> np.ndarray:
    """Typed array or list of integers -> int64 numpy array (signed, as stored)."""
    kind = kind_of(value)
    if kind is TagKind.INT_ARRAY:
        if not np.issubdtype(value.dtype, np.integer):
            raise MalformedTagTree(f"{what}: expected integer array, got {value.dtype}")
        return np.asarray(value, dtype=np.int64)
    if kind is TagKind.LIST:
        return np.array([as_int(v, f"{what}[{i}]") for i, v in enumerate(value)], dtype=np.int64)
    raise MalformedTagTree(f"{what}: expected int_array or list, got {kind.value}")


def int_array(node, key: str) -> np.ndarray:
    return to_int_array(field(node, key), key)


def xyz(node, key: str) -> tuple[int, int, int]:
    """A size or position stored either as a 3-element list or as an {x, y, z} compound."""
    value = field(node, key)
    if kind_of(value) is TagKind.COMPOUND:
        return integer(value, "x"), integer(value, "y"), integer(value, "z")
    values = to_int_array(value, key)
    if len(values) != 3:
        raise MalformedTagTree(f"{key}: expected 3 elements, got {len(values)}")
    return int(values[0]), int(values[1]), int(values[2])
