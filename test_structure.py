import pytest
from nbtlib import Compound, List
from nbtlib.tag import Int, String

import importer_structure
from blueprint import PositionedBlock
from orientation import Face, resolve_face
from schem_errors import MalformedTagTree, PaletteIndexOutOfRange, SizeInvariantViolation


def state(name, **properties):
    entry = {"Name": String(name)}
    if properties:
        entry["Properties"] = Compound({k: String(v) for k, v in properties.items()})
    return Compound(entry)


def block(x, y, z, index):
    return Compound({"pos": List[Int]([x, y, z]), "state": Int(index)})


def structure(size, palette, blocks, palette_key="palette"):
    if palette_key == "palettes":
        palette_tag = List[List[Compound]]([List[Compound](palette)])
    else:
        palette_tag = List[Compound](palette)
    return Compound({
        "DataVersion": Int(3465),
        "size": List[Int](list(size)),
        palette_key: palette_tag,
        "blocks": List[Compound](blocks),
        "entities": List[Compound]([]),
    })


PALETTE = [
    state("minecraft:stone_bricks"),
    state("minecraft:oak_stairs", facing="east", half="bottom", shape="straight"),
    state("minecraft:wall_torch", facing="north"),
    state("minecraft:oak_door", facing="west", half="lower", hinge="left", open="false"),
    state("minecraft:hopper", facing="down"),
]


def test_blocks_keep_file_order_and_read_facing():
    tree = structure(
        (2, 2, 2),
        PALETTE,
        [block(1, 1, 1, 4), block(0, 0, 0, 0), block(1, 0, 0, 1), block(0, 1, 0, 2), block(0, 0, 1, 3)],
    )
    bp = importer_structure.decode(tree, "tower")

    assert list(bp.blocks) == [
        PositionedBlock(1, 1, 1, "hopper", 0),
        PositionedBlock(0, 0, 0, "stone_bricks", 0),
        PositionedBlock(1, 0, 0, "oak_stairs", 3),
        PositionedBlock(0, 1, 0, "wall_torch", 0),
        PositionedBlock(0, 0, 1, "oak_door", 2),
    ]
    assert resolve_face("oak_door", bp.blocks[4].raw_state) is Face.west
    assert bp.materials["stone_bricks"] == 1


@pytest.mark.parametrize("facing, code", [("north", 0), ("south", 1), ("west", 2), ("east", 3), ("up", 0)])
def test_facing_codes(facing, code):
    tree = structure((1, 1, 1), [state("minecraft:oak_stairs", facing=facing)], [block(0, 0, 0, 0)])
    assert importer_structure.decode(tree, "s").blocks[0].raw_state == code


def test_absent_cells_are_air():
    tree = structure((5, 5, 5), PALETTE, [block(4, 4, 4, 0)])
    bp = importer_structure.decode(tree, "sparse")
    assert len(bp.blocks) == 1
    assert bp.size == (5, 5, 5)


def test_first_palette_variant_is_used():
    tree = structure((1, 1, 1), PALETTE, [block(0, 0, 0, 1)], palette_key="palettes")
    assert importer_structure.decode(tree, "v").blocks[0].type == "oak_stairs"


def test_missing_palette():
    tree = structure((1, 1, 1), PALETTE, [block(0, 0, 0, 0)])
    del tree["palette"]
    with pytest.raises(MalformedTagTree, match="palette"):
        importer_structure.decode(tree, "nopal")


@pytest.mark.parametrize("index", [5, 99, -1])
def test_state_outside_palette(index):
    tree = structure((1, 1, 1), PALETTE, [block(0, 0, 0, index)])
    with pytest.raises(PaletteIndexOutOfRange):
        importer_structure.decode(tree, "bad")


def test_position_outside_size():
    tree = structure((2, 1, 2), PALETTE, [block(0, 0, 0, 0), block(0, 1, 0, 0)])
    with pytest.raises(SizeInvariantViolation):
        importer_structure.decode(tree, "tall")


def test_two_blocks_at_one_position():
    tree = structure((2, 2, 2), PALETTE, [block(1, 0, 1, 0), block(1, 0, 1, 1)])
    with pytest.raises(MalformedTagTree):
        importer_structure.decode(tree, "dup")


def test_position_needs_three_coordinates():
    bad = Compound({"pos": List[Int]([0, 0]), "state": Int(0)})
    with pytest.raises(MalformedTagTree):
        importer_structure.decode(structure((1, 1, 1), PALETTE, [bad]), "flat")
