import json

from nbtlib import Compound
from nbtlib.tag import Short

from verify_schem import main


def write_house(save_nbt, byte_array, filename="house.schematic"):
    # 2x2x1: stone floor, glass and air above
    root = Compound({
        "Width": Short(2),
        "Height": Short(2),
        "Length": Short(1),
        "Blocks": byte_array([1, 1, 20, 0]),
        "Data": byte_array([0, 0, 0, 0]),
    })
    return save_nbt(filename, root, gzipped=True)


def test_report(save_nbt, byte_array, capsys):
    path = write_house(save_nbt, byte_array)
    assert main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "CHECKING: " + str(path) in out
    assert "Dimensions: 2 x 2 x 1  (volume: 4)" in out
    assert "Blocks: 3  |  Materials: 2" in out
    lines = out.splitlines()
    stone = next(i for i, line in enumerate(lines) if line.strip().startswith("stone"))
    glass = next(i for i, line in enumerate(lines) if line.strip().startswith("glass"))
    assert stone < glass


def test_top_limits_material_list(save_nbt, byte_array, capsys):
    path = write_house(save_nbt, byte_array)
    main([str(path), "--top", "1"])
    out = capsys.readouterr().out
    assert "stone" in out
    assert "glass" not in out


def test_layers(save_nbt, byte_array, capsys):
    path = write_house(save_nbt, byte_array)
    main([str(path), "--layers"])
    out = capsys.readouterr().out
    assert "Layers (bottom first):" in out
    assert "y=0    2 blocks" in out
    assert "y=1    1 blocks" in out


def test_json_output(save_nbt, byte_array, tmp_path, capsys):
    path = write_house(save_nbt, byte_array)
    out_path = tmp_path / "out" / "house.json"
    assert main([str(path), "--json", str(out_path)]) == 0

    assert "Saved: " + str(out_path) in capsys.readouterr().out
    data = json.loads(out_path.read_text())
    assert data["name"] == "house"
    assert data["metadata"]["materials"] == {"stone": 2, "glass": 1}


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.schem")]) == 2
    assert "Missing schematic" in capsys.readouterr().err


def test_unsupported_extension(tmp_path, capsys):
    path = tmp_path / "house.mcstructure"
    path.write_bytes(b"\x00")
    assert main([str(path)]) == 2
    assert "Unsupported schematic format" in capsys.readouterr().err


def test_decode_error(tmp_path, capsys):
    path = tmp_path / "house.schem"
    path.write_bytes(b"plain bytes")
    assert main([str(path)]) == 1
    assert "!! ERROR: CorruptArchive:" in capsys.readouterr().err
