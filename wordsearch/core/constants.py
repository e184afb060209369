"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Tuple


EMPTY_CELL = ""
MAX_PLACEMENT_ATTEMPTS = 100


class DirectionMode(str, Enum):
    """How a word's characters map onto a placement's position order."""

    FORWARD = "forward"
    BACKWARD = "backward"
    FORWARD_BACKWARD = "forwardBackward"
    SCATTER = "scatter"


class PlacementType(str, Enum):
    """Shape tags attached to every candidate placement."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal-down"
    DIAGONAL_UP = "diagonal-up"
    BEND_STRAIGHT_HV = "bend-straight-hv"
    BEND_STRAIGHT_VH = "bend-straight-vh"
    BEND_DIAGONAL_DOWN_UP = "bend-diagonal-down-up"
    BEND_DIAGONAL_UP_DOWN = "bend-diagonal-up-down"
    BLOCK = "block"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


@dataclass(frozen=True)
class BlockDimensions:
    width: int
    height: int


# Word length -> rectangles whose area equals the length.
BLOCK_DIMENSIONS: Dict[int, Tuple[BlockDimensions, ...]] = {
    4: (BlockDimensions(2, 2),),
    6: (BlockDimensions(2, 3), BlockDimensions(3, 2)),
    8: (BlockDimensions(2, 4), BlockDimensions(4, 2)),
    9: (BlockDimensions(3, 3),),
    10: (BlockDimensions(2, 5), BlockDimensions(5, 2)),
    12: (
        BlockDimensions(2, 6),
        BlockDimensions(6, 2),
        BlockDimensions(3, 4),
        BlockDimensions(4, 3),
    ),
    14: (BlockDimensions(2, 7), BlockDimensions(7, 2)),
    15: (BlockDimensions(3, 5), BlockDimensions(5, 3)),
    16: (BlockDimensions(4, 4), BlockDimensions(2, 8), BlockDimensions(8, 2)),
}

UNSUPPORTED_BLOCK_LENGTHS: FrozenSet[int] = frozenset({3, 5, 7, 11, 13})
