# blueprint.py
"""
Canonical block model shared by every schematic importer.

A Blueprint is built once by one importer and treated as read-only afterwards.
Coordinates are local to the structure: (0, 0, 0) is its minimum corner and every
block satisfies 0 <= coord < size on each axis. Air is never stored.

The persisted form is plain JSON:

    {"name": ..., "metadata": {"size": {"x", "y", "z"}, "materials": {...}, "tags": [...]},
     "blocks": [{"x", "y", "z", "type", "rawState"}, ...]}
"""

import json
import logging
import os
from collections import Counter
from dataclasses import dataclass
from typing import NamedTuple

from schem_errors import MalformedTagTree, SizeInvariantViolation

logger = logging.getLogger(__name__)


class Size(NamedTuple):
    x: int
    y: int
    z: int


@dataclass(frozen=True)
class PositionedBlock:
    x: int
    y: int
    z: int
    type: str  # normalized, e.g. "oak_door"
    raw_state: int = 0  # format-specific orientation code, see orientation.resolve_face

    @property
    def position(self):
        return self.x, self.y, self.z


def aggregate_materials(blocks) -> dict[str, int]:
    """Block type -> number of occurrences."""
    return dict(Counter(block.type for block in blocks))


def validate_blocks(blocks, size: Size) -> None:
    """Raise if a block lies outside `size` or two blocks share a position."""
    seen = set()
    for block in blocks:
        for axis, coord, limit in zip("xyz", block.position, size):
            if not 0 <= coord < limit:
                raise SizeInvariantViolation(
                    f"{block.type} at {block.position}: {axis}={coord} outside [0, {limit})"
                )
        if block.position in seen:
            raise MalformedTagTree(f"two blocks at {block.position}")
        seen.add(block.position)


class Blueprint:
    def __init__(self, name, size, blocks=(), tags=None):
        self.name = name
        self.size = Size(*size)
        if min(self.size) < 0:
            raise MalformedTagTree(f"negative size {tuple(self.size)}")
        self.blocks = tuple(blocks)
        self.tags = list(tags or [])
        self.materials = {}
        self.calculate_materials()

    def calculate_materials(self):
        self.materials = aggregate_materials(self.blocks)
        return self.materials

    def __repr__(self):
        return f"Blueprint({self.name!r}, size={tuple(self.size)}, blocks={len(self.blocks)})"

    def to_dict(self):
        return {
            "name": self.name,
            "metadata": {
                "size": self.size._asdict(),
                "materials": dict(self.materials),
                "tags": list(self.tags),
            },
            "blocks": [
                {"x": b.x, "y": b.y, "z": b.z, "type": b.type, "rawState": b.raw_state}
                for b in self.blocks
            ],
        }

    @classmethod
    def from_dict(cls, data):
        try:
            metadata = data["metadata"]
            size = Size(*(_json_int(metadata["size"][axis], f"size.{axis}") for axis in "xyz"))
            blocks = [
                PositionedBlock(
                    _json_int(b["x"], "x"), _json_int(b["y"], "y"), _json_int(b["z"], "z"),
                    str(b["type"]), _json_int(b.get("rawState", 0), "rawState", minimum=0),
                )
                for b in data["blocks"]
            ]
            name = str(data["name"])
            tags = metadata.get("tags", [])
        except (KeyError, TypeError, AttributeError) as err:
            raise MalformedTagTree(f"invalid persisted blueprint: {err!r}") from err
        if not isinstance(tags, list):
            raise MalformedTagTree(f"tags: expected a list, got {type(tags).__name__}")

        validate_blocks(blocks, size)
        blueprint = cls(name, size, blocks, tags)
        stored = metadata.get("materials")
        if stored is not None and stored != blueprint.materials:
            logger.warning("%s: stored materials differ from blocks, using recomputed counts", name)
        return blueprint


def _json_int(value, what, minimum=None):
    # bool is an int subclass; floats are never truncated
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedTagTree(f"{what}: expected an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise MalformedTagTree(f"{what}: {value} is below {minimum}")
    return value


def save_json(blueprint, path):
    path = os.path.abspath(os.path.expanduser(path))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(blueprint.to_dict(), f, indent=2)
    return path


def load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise MalformedTagTree(f"{path}: not valid JSON: {err}") from err
    return Blueprint.from_dict(data)
