import pytest
from nbtlib import Compound
from nbtlib.tag import Int, Short

import importer_common
import importer_legacy
import importer_palette
import importer_sponge
from schem_errors import MalformedTagTree, PaletteIndexOutOfRange, SizeInvariantViolation

PALETTE = {"minecraft:air": Int(0), "minecraft:stone": Int(1), "minecraft:oak_planks[]": Int(2)}


def v3_tree(W, H, D, cells, byte_array):
    return Compound({
        "Schematic": Compound({
            "Version": Int(3),
            "DataVersion": Int(3465),
            "Width": Short(W),
            "Height": Short(H),
            "Length": Short(D),
            "Blocks": Compound({
                "Palette": Compound(PALETTE),
                "Data": byte_array(cells),
            }),
        })
    })


def v2_tree(W, H, D, cells, byte_array):
    return Compound({
        "Version": Int(2),
        "Width": Short(W),
        "Height": Short(H),
        "Length": Short(D),
        "PaletteMax": Int(len(PALETTE)),
        "Palette": Compound(PALETTE),
        "BlockData": byte_array(cells),
    })


def test_v3_container_keeps_air(byte_array):
    bp = importer_sponge.decode(v3_tree(2, 1, 2, [0, 1, 2, 0], byte_array), "shed")

    assert len(bp.blocks) == 4
    assert bp.materials == {"air": 2, "stone": 1, "oak_planks": 1}
    assert all(b.raw_state == 0 for b in bp.blocks)


def test_palette_importer_drops_the_same_air(byte_array):
    cells = [0, 1, 2, 0]
    sponge = importer_sponge.decode(v3_tree(2, 1, 2, cells, byte_array), "a")
    palette = importer_palette.decode(v2_tree(2, 1, 2, cells, byte_array), "b")

    assert len(sponge.blocks) == 4
    assert len(palette.blocks) == 2
    assert {b for b in sponge.blocks if b.type != "air"} == set(palette.blocks)


def test_v2_root_without_container(byte_array):
    bp = importer_sponge.decode(v2_tree(1, 3, 1, [2, 1, 2], byte_array), "pillar")
    assert [(b.y, b.type) for b in bp.blocks] == [(0, "oak_planks"), (1, "stone"), (2, "oak_planks")]


def test_same_layout_as_legacy(byte_array):
    W, H, D = 3, 2, 2
    cells = [1 if i % 3 == 0 else 0 for i in range(W * H * D)]
    legacy = importer_legacy.decode(
        Compound({
            "Width": Short(W), "Height": Short(H), "Length": Short(D),
            "Blocks": byte_array(cells), "Data": byte_array([0] * len(cells)),
        }),
        "legacy",
    )
    sponge = importer_sponge.decode(v3_tree(W, H, D, cells, byte_array), "sponge")
    stones = {b.position for b in sponge.blocks if b.type == "stone"}
    assert stones == {b.position for b in legacy.blocks}


def test_multi_byte_varint(byte_array):
    assert importer_common.decode_varints(byte_array([0xC8, 0x01, 0x05, 0x7F])).tolist() == [200, 5, 127]


def test_large_palette_index(byte_array):
    palette = {f"minecraft:block_{i}": Int(i) for i in range(201)}
    tree = v2_tree(2, 1, 1, [], byte_array)
    tree["Palette"] = Compound(palette)
    tree["BlockData"] = byte_array([0xC8, 0x01, 0x03])
    assert [b.type for b in importer_sponge.decode(tree, "wide").blocks] == ["block_200", "block_3"]


def test_truncated_varint(byte_array):
    with pytest.raises(MalformedTagTree):
        importer_sponge.decode(v2_tree(2, 1, 1, [0x01, 0x80], byte_array), "cut")


def test_index_without_palette_entry(byte_array):
    with pytest.raises(PaletteIndexOutOfRange):
        importer_sponge.decode(v3_tree(2, 1, 1, [1, 9], byte_array), "gap")


def test_missing_dimensions(byte_array):
    tree = v3_tree(1, 1, 1, [1], byte_array)
    del tree["Schematic"]["Length"]
    with pytest.raises(MalformedTagTree):
        importer_sponge.decode(tree, "flat")


@pytest.mark.parametrize("cells", [[1, 0], [1, 9]])
def test_cells_past_the_declared_size(byte_array, cells):
    with pytest.raises(SizeInvariantViolation):
        importer_sponge.decode(v3_tree(1, 1, 1, cells, byte_array), "long")
