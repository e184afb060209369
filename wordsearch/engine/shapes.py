"""Shape enumeration: every geometric placement a word could occupy.

Enumeration is purely geometric. Board contents are never consulted here;
collisions are resolved later by the placement engine.
"""

from __future__ import annotations

from typing import List

from ..core.constants import BLOCK_DIMENSIONS, BlockDimensions, PlacementType
from ..core.models import BoardSize, Placement, ShapeFlags


def horizontal_placements(length: int, size: BoardSize) -> List[Placement]:
    placements: List[Placement] = []
    for row in range(size.height):
        for col in range(size.width - length + 1):
            positions = tuple((row, col + i) for i in range(length))
            placements.append(Placement(PlacementType.HORIZONTAL, positions))
    return placements


def vertical_placements(length: int, size: BoardSize) -> List[Placement]:
    placements: List[Placement] = []
    for row in range(size.height - length + 1):
        for col in range(size.width):
            positions = tuple((row + i, col) for i in range(length))
            placements.append(Placement(PlacementType.VERTICAL, positions))
    return placements


def diagonal_placements(length: int, size: BoardSize) -> List[Placement]:
    placements: List[Placement] = []
    # Top-left to bottom-right
    for row in range(size.height - length + 1):
        for col in range(size.width - length + 1):
            positions = tuple((row + i, col + i) for i in range(length))
            placements.append(Placement(PlacementType.DIAGONAL_DOWN, positions))
    # Top-right to bottom-left
    for row in range(size.height - length + 1):
        for col in range(length - 1, size.width):
            positions = tuple((row + i, col - i) for i in range(length))
            placements.append(Placement(PlacementType.DIAGONAL_UP, positions))
    return placements


def bend_straight_placements(length: int, size: BoardSize) -> List[Placement]:
    """L-shaped placements with a single right-angle bend.

    The first ``bend`` letters run along the first leg; the bend cell is the
    last letter of that leg and the remaining letters continue from it.
    """

    placements: List[Placement] = []
    for start_row in range(size.height):
        for start_col in range(size.width):
            for bend in range(1, length):
                tail = length - bend
                # Horizontal then vertical
                if start_col + bend <= size.width and start_row + tail < size.height:
                    corner_col = start_col + bend - 1
                    positions = tuple(
                        [(start_row, start_col + i) for i in range(bend)]
                        + [(start_row + i, corner_col) for i in range(1, tail + 1)]
                    )
                    placements.append(Placement(PlacementType.BEND_STRAIGHT_HV, positions))
                # Vertical then horizontal
                if start_row + bend <= size.height and start_col + tail < size.width:
                    corner_row = start_row + bend - 1
                    positions = tuple(
                        [(start_row + i, start_col) for i in range(bend)]
                        + [(corner_row, start_col + i) for i in range(1, tail + 1)]
                    )
                    placements.append(Placement(PlacementType.BEND_STRAIGHT_VH, positions))
    return placements


def bend_diagonal_placements(length: int, size: BoardSize) -> List[Placement]:
    """Two diagonal legs meeting at a pivot, both advancing left to right.

    ``down-up`` descends for ``bend`` letters then climbs (a V), ``up-down``
    climbs then descends. Every letter sits one column right of the previous.
    """

    placements: List[Placement] = []
    if size.width < length:
        return placements
    for start_row in range(size.height):
        for start_col in range(size.width - length + 1):
            for bend in range(1, length):
                pivot = bend - 1
                # Down then up
                lowest = start_row + pivot
                highest = lowest - (length - bend)
                if lowest < size.height and highest >= 0:
                    positions = tuple(
                        (start_row + i if i <= pivot else start_row + 2 * pivot - i, start_col + i)
                        for i in range(length)
                    )
                    placements.append(Placement(PlacementType.BEND_DIAGONAL_DOWN_UP, positions))
                # Up then down
                highest = start_row - pivot
                lowest = highest + (length - bend)
                if highest >= 0 and lowest < size.height:
                    positions = tuple(
                        (start_row - i if i <= pivot else start_row - 2 * pivot + i, start_col + i)
                        for i in range(length)
                    )
                    placements.append(Placement(PlacementType.BEND_DIAGONAL_UP_DOWN, positions))
    return placements


def block_dimensions_for(length: int) -> List[BlockDimensions]:
    return list(BLOCK_DIMENSIONS.get(length, ()))


def block_placements(length: int, size: BoardSize) -> List[Placement]:
    placements: List[Placement] = []
    for block in block_dimensions_for(length):
        for start_row in range(size.height - block.height + 1):
            for start_col in range(size.width - block.width + 1):
                cells = [
                    (start_row + r, start_col + c)
                    for r in range(block.height)
                    for c in range(block.width)
                ]
                placements.append(
                    Placement(PlacementType.BLOCK, tuple(cells[:length]), block_dimensions=block)
                )
    return placements


def generate_placements(length: int, size: BoardSize, lines: ShapeFlags) -> List[Placement]:
    """Concatenate the candidates of every enabled shape category."""

    placements: List[Placement] = []
    if lines.horizontal:
        placements.extend(horizontal_placements(length, size))
    if lines.vertical:
        placements.extend(vertical_placements(length, size))
    if lines.diagonal:
        placements.extend(diagonal_placements(length, size))
    if lines.bends_straight:
        placements.extend(bend_straight_placements(length, size))
    if lines.bends_diagonal:
        placements.extend(bend_diagonal_placements(length, size))
    if lines.block:
        placements.extend(block_placements(length, size))
    return placements
