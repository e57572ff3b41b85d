# orientation.py
"""
Placement face for a block, from its type and the raw state its importer recorded.

Rules are matched on the type name, most specific first:
    *door*    [north, south, west, east][raw & 3]
    *torch*   5 -> bottom, 1..4 -> [east, west, south, north]; anything else is invalid
    *stairs*  [east, west, south, north][raw & 3]
    other     bottom
"""

from enum import Enum

from schem_errors import InvalidOrientationCode


class Face(str, Enum):
    north = "north"
    south = "south"
    east = "east"
    west = "west"
    top = "top"
    bottom = "bottom"

    def __str__(self):
        return self.value


_DOOR_FACES = (Face.north, Face.south, Face.west, Face.east)
_TORCH_FACES = (Face.east, Face.west, Face.south, Face.north)
_STAIRS_FACES = (Face.east, Face.west, Face.south, Face.north)


def resolve_face(block_type: str, raw_state: int) -> Face:
    if "door" in block_type:
        return _DOOR_FACES[raw_state & 0b11]
    if "torch" in block_type:
        if raw_state == 5:
            return Face.bottom
        if not 1 <= raw_state <= 4:
            raise InvalidOrientationCode(f"{block_type}: torch state {raw_state} outside 1..5")
        return _TORCH_FACES[raw_state - 1]
    if "stairs" in block_type:
        return _STAIRS_FACES[raw_state & 0b11]
    return Face.bottom
