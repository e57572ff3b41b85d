# schem_archive.py
"""
Read a schematic file into a Blueprint.

The extension picks the importer:
    .schem       Sponge (gzip)
    .litematic   Litematica (gzip)
    .nbt / .schematic   structure template, palette schematic or legacy schematic,
                        told apart by the fields of the root compound

Usage:
    blueprint = load_blueprint("schematics/house_wooden_small.schem")
"""

import gzip
import logging
import os
import zlib
from enum import Enum

import importer_legacy
import importer_litematic
import importer_palette
import importer_sponge
import importer_structure
import nbt_tree
from schem_errors import CorruptArchive

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


class SchematicFormat(Enum):
    LEGACY = "legacy"
    PALETTE = "palette"
    STRUCTURE = "structure"
    SPONGE = "sponge"
    LITEMATIC = "litematic"


COMPRESSED_FORMATS = {SchematicFormat.SPONGE, SchematicFormat.LITEMATIC}

# None: shared extension, the format is read off the tag tree
_EXTENSION_FORMATS = {
    ".nbt": None,
    ".schematic": None,
    ".schem": SchematicFormat.SPONGE,
    ".litematic": SchematicFormat.LITEMATIC,
}
SUPPORTED_EXTENSIONS = tuple(_EXTENSION_FORMATS)

_DECODERS = {
    SchematicFormat.LEGACY: importer_legacy.decode,
    SchematicFormat.PALETTE: importer_palette.decode,
    SchematicFormat.STRUCTURE: importer_structure.decode,
    SchematicFormat.SPONGE: importer_sponge.decode,
    SchematicFormat.LITEMATIC: importer_litematic.decode,
}


def format_for_path(path):
    """SchematicFormat for the file's extension, or None when the tag tree decides."""
    ext = os.path.splitext(str(path))[1].lower()
    if ext not in _EXTENSION_FORMATS:
        raise ValueError(f"Unsupported schematic format: {ext or os.path.basename(str(path))}")
    return _EXTENSION_FORMATS[ext]


def _gunzip(data):
    if data[:2] != GZIP_MAGIC:
        raise CorruptArchive("not a gzip stream (bad magic)")
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as err:
        raise CorruptArchive(f"gzip stream is damaged: {err}") from err


def decompress(data: bytes, fmt=None) -> bytes:
    """
    Bytes ready for the NBT parser.

    Sponge and Litematica files must be gzipped (a second gzip layer is
    unwrapped too). Other formats pass through unless they carry the gzip magic,
    which structure templates and most .schematic files do.
    """
    if fmt in COMPRESSED_FORMATS:
        data = _gunzip(data)
        if data[:2] == GZIP_MAGIC:
            data = _gunzip(data)
        return data
    if data[:2] == GZIP_MAGIC:
        return _gunzip(data)
    return data


def select_nbt_dialect(tree) -> SchematicFormat:
    """Pick the importer for a .nbt / .schematic root compound."""
    if nbt_tree.has(tree, "size") and nbt_tree.has(tree, "blocks"):
        return SchematicFormat.STRUCTURE
    if nbt_tree.has(tree, "Palette"):
        return SchematicFormat.PALETTE
    return SchematicFormat.LEGACY


def decode(fmt, tree, name, legacy_ids=None):
    if fmt is SchematicFormat.LEGACY and legacy_ids is not None:
        return importer_legacy.decode(tree, name, legacy_ids=legacy_ids)
    return _DECODERS[fmt](tree, name)


def load_blueprint(path, legacy_ids=None):
    """Read, decompress, parse and decode one schematic file."""
    fmt = format_for_path(path)
    name = os.path.splitext(os.path.basename(str(path)))[0]
    with open(path, "rb") as f:
        data = f.read()

    tree = nbt_tree.parse_tag_tree(decompress(data, fmt))
    if fmt is None:
        fmt = select_nbt_dialect(tree)
    logger.debug("%s: reading as %s", path, fmt.value)
    return decode(fmt, tree, name, legacy_ids=legacy_ids)
