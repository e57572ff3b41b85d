# verify_schem.py
# Decode a schematic file and report what it contains: dimensions, materials,
# and optionally the bottom-up layer plan. Can also save the decoded blueprint as JSON.

import argparse
import logging
import os
import sys

from blueprint import save_json
from build_planner import plan
from schem_archive import format_for_path, load_blueprint
from schem_errors import SchematicError


def main(argv=None):
    ap = argparse.ArgumentParser(description="Decode a schematic and print what it contains.")
    ap.add_argument("path", help="Path to .nbt / .schematic / .schem / .litematic")
    ap.add_argument("--json", help="Also write the decoded blueprint to this JSON file")
    ap.add_argument("--layers", action="store_true", help="Print the block count of every layer, bottom first")
    ap.add_argument("--top", type=int, default=10, help="Number of materials to list")
    ap.add_argument("-v", "--verbose", action="store_true", help="Show decoder debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(format="%(message)s")
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    path = os.path.abspath(os.path.expanduser(args.path))
    print("CHECKING:", path)
    if not os.path.isfile(path):
        print(f"Missing schematic: {path}", file=sys.stderr)
        return 2
    try:
        format_for_path(path)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    try:
        bp = load_blueprint(path)
    except SchematicError as e:
        print(f"!! ERROR: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    W, H, L = bp.size
    print(f"Dimensions: {W} x {H} x {L}  (volume: {W*H*L})")
    print(f"Blocks: {len(bp.blocks)}  |  Materials: {len(bp.materials)}")
    ranked = sorted(bp.materials.items(), key=lambda kv: (-kv[1], kv[0]))
    for name, count in ranked[: args.top]:
        print(f"  {name:<32} {count}")

    if args.layers:
        print("Layers (bottom first):")
        for layer in plan(bp.blocks):
            print(f"  y={layer.y:<4} {len(layer.blocks)} blocks")

    if args.json:
        out = save_json(bp, args.json)
        print("Saved:", out)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
