# importer_structure.py
"""
Import a vanilla structure template (.nbt, as written by structure blocks).

    size      [x, y, z]
    palette   [{Name, Properties?}, ...]   (or "palettes": [[...], ...], first variant used)
    blocks    [{pos: [x, y, z], state}, ...]   any order, air is simply absent

Orientation comes from the "facing" property, mapped to a 2-bit code.
"""

import nbt_tree
from blueprint import PositionedBlock, Size
from importer_common import finish_blueprint, normalize_type, palette_lookup
from nbt_tree import TagKind
from schem_errors import MalformedTagTree

FACING_CODES = {"north": 0, "south": 1, "west": 2, "east": 3}


def _raw_state(entry):
    if not nbt_tree.has(entry, "Properties"):
        return 0
    properties = nbt_tree.compound(entry, "Properties")
    if "facing" not in properties:
        return 0
    # up / down have no horizontal code
    return FACING_CODES.get(nbt_tree.string(properties, "facing").lower(), 0)


def _palette_entries(tree):
    if nbt_tree.has(tree, "palette") or not nbt_tree.has(tree, "palettes"):
        return nbt_tree.list_of(tree, "palette", TagKind.COMPOUND)

    variants = nbt_tree.list_of(tree, "palettes", TagKind.LIST)
    if not variants:
        raise MalformedTagTree("palettes: no palette variants")
    for i, entry in enumerate(variants[0]):
        if nbt_tree.kind_of(entry) is not TagKind.COMPOUND:
            raise MalformedTagTree(f"palettes[0][{i}]: expected compound")
    return variants[0]


def decode(tree, name):
    size = Size(*nbt_tree.xyz(tree, "size"))
    if min(size) < 0:
        raise MalformedTagTree(f"negative size {tuple(size)}")

    palette = [
        (normalize_type(nbt_tree.string(entry, "Name")), _raw_state(entry))
        for entry in _palette_entries(tree)
    ]

    blocks = []
    for entry in nbt_tree.list_of(tree, "blocks", TagKind.COMPOUND):
        x, y, z = nbt_tree.xyz(entry, "pos")
        block_type, raw_state = palette_lookup(palette, nbt_tree.integer(entry, "state"), (x, y, z))
        blocks.append(PositionedBlock(x, y, z, block_type, raw_state))

    return finish_blueprint(name, size, blocks, "structure template")
