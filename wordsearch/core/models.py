"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .constants import BlockDimensions, Bounds, DirectionMode, PlacementType
from .exceptions import PlacementError


Coordinate = Tuple[int, int]

# camelCase keys used by JSON callers.
_FLAG_ALIASES = {
    "bendsStraight": "bends_straight",
    "bendsDiagonal": "bends_diagonal",
}


@dataclass(frozen=True)
class BoardSize:
    width: int
    height: int

    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)


@dataclass(frozen=True)
class ShapeFlags:
    """Which placement shapes are legal for a run."""

    horizontal: bool = False
    vertical: bool = False
    diagonal: bool = False
    bends_straight: bool = False
    bends_diagonal: bool = False
    block: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ShapeFlags":
        values: Dict[str, bool] = {}
        for key, value in data.items():
            name = _FLAG_ALIASES.get(key, key)
            if name not in cls.__dataclass_fields__:
                raise KeyError(key)
            values[name] = bool(value)
        return cls(**values)

    def any_enabled(self) -> bool:
        return any(
            (
                self.horizontal,
                self.vertical,
                self.diagonal,
                self.bends_straight,
                self.bends_diagonal,
                self.block,
            )
        )

    def to_jsonable(self) -> Dict[str, bool]:
        return {
            "horizontal": self.horizontal,
            "vertical": self.vertical,
            "diagonal": self.diagonal,
            "bendsStraight": self.bends_straight,
            "bendsDiagonal": self.bends_diagonal,
            "block": self.block,
        }


@dataclass(frozen=True)
class AlignmentConfig:
    lines: ShapeFlags
    direction: DirectionMode = DirectionMode.FORWARD


@dataclass(frozen=True)
class Placement:
    """A candidate ordered list of cells proposed for one word."""

    type: PlacementType
    positions: Tuple[Coordinate, ...]
    block_dimensions: Optional[BlockDimensions] = None

    def __len__(self) -> int:
        return len(self.positions)

    def to_jsonable(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": self.type.value,
            "positions": [[row, col] for row, col in self.positions],
        }
        if self.block_dimensions is not None:
            payload["block_dimensions"] = {
                "width": self.block_dimensions.width,
                "height": self.block_dimensions.height,
            }
        return payload


@dataclass
class PlacementResult:
    success: bool
    reason: Optional[str] = None
    placement: Optional[Placement] = None
    letters: Optional[str] = None
    attempts: int = 0

    def raise_for_failure(self, word: str) -> None:
        if not self.success:
            raise PlacementError(f"Could not place word {word!r}: {self.reason}")


@dataclass
class PlacedWord:
    word: str
    placement: Placement
    letters: str

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "letters": self.letters,
            "placement": self.placement.to_jsonable(),
        }


@dataclass
class FailedWord:
    word: str
    reason: str


@dataclass
class GenerationResult:
    board: List[List[str]]
    placed: List[PlacedWord] = field(default_factory=list)
    failed: List[FailedWord] = field(default_factory=list)
    seed: Optional[int] = None

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "board": [list(row) for row in self.board],
            "placed": [entry.to_jsonable() for entry in self.placed],
            "failed": [{"word": entry.word, "reason": entry.reason} for entry in self.failed],
            "seed": self.seed,
        }
