"""Board store: the mutable grid of letter cells."""

from __future__ import annotations

from typing import List

from ..core.constants import EMPTY_CELL
from ..core.exceptions import OutOfBoundsError
from ..core.models import BoardSize, Coordinate


class Board:
    """Encapsulates the word search grid with collision helpers.

    Cells hold either :data:`EMPTY_CELL` or exactly one character. A filled
    cell is only ever re-written with the same character, which is what lets
    two words cross.
    """

    def __init__(self, size: BoardSize) -> None:
        self.size = size
        self.bounds = size.bounds()
        self.cells: List[List[str]] = [
            [EMPTY_CELL for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]

    @classmethod
    def create(cls, size: BoardSize) -> "Board":
        return cls(size)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, coordinate: Coordinate) -> str:
        row, col = coordinate
        if not self.bounds.contains(row, col):
            raise OutOfBoundsError(
                f"Coordinate {(row, col)} outside {self.bounds.rows}x{self.bounds.cols} board"
            )
        return self.cells[row][col]

    def can_accept(self, coordinate: Coordinate, character: str) -> bool:
        current = self.get(coordinate)
        return current == EMPTY_CELL or current == character

    def write(self, coordinate: Coordinate, character: str) -> None:
        # Caller has already checked can_accept for this coordinate.
        row, col = coordinate
        self.cells[row][col] = character

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def filled_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell != EMPTY_CELL)

    def rows(self) -> List[List[str]]:
        return [list(row) for row in self.cells]