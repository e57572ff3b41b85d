# build_planner.py
"""
Order a blueprint's blocks for construction and drive a placement callback.

plan() groups blocks by y, bottom layer first. Inside a layer the importer's
emission order is kept as is. A layer is only valid once the one below exists,
so callers must not reorder layers.
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from blueprint import PositionedBlock
from orientation import Face, resolve_face
from schem_errors import InvalidOrientationCode

logger = logging.getLogger(__name__)


class Layer(NamedTuple):
    y: int
    blocks: list[PositionedBlock]


def plan(blocks) -> list[Layer]:
    layers = {}
    for block in blocks:
        layers.setdefault(block.y, []).append(block)
    return [Layer(y, layers[y]) for y in sorted(layers)]


@dataclass
class BuildReport:
    placed: int = 0
    failed: list[PositionedBlock] = field(default_factory=list)


def placement_face(block) -> Face:
    try:
        return resolve_face(block.type, block.raw_state)
    except InvalidOrientationCode:
        # e.g. torches from palette formats, which carry no torch metadata
        logger.debug("%s at %s: no usable orientation, placing on bottom", block.type, block.position)
        return Face.bottom


def build(blueprint, place, origin=(0, 0, 0)) -> BuildReport:
    """
    Place every block of `blueprint`, layer by layer, relative to `origin`.

    `place(type, x, y, z, face)` returns a truthy value on success. A failed
    placement is logged and skipped; exceptions raised by `place` propagate.
    """
    ox, oy, oz = origin
    report = BuildReport()
    for layer in plan(blueprint.blocks):
        for block in layer.blocks:
            face = placement_face(block)
            if place(block.type, ox + block.x, oy + block.y, oz + block.z, face):
                report.placed += 1
            else:
                logger.warning(
                    "Failed to place %s at relative position %d,%d,%d", block.type, block.x, block.y, block.z
                )
                report.failed.append(block)

    logger.info("%s: placed %d blocks, %d failed", blueprint.name, report.placed, len(report.failed))
    return report
