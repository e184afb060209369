"""Placement engine: randomized retry over a precomputed candidate pool."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from ..core.constants import MAX_PLACEMENT_ATTEMPTS
from ..core.models import AlignmentConfig, BoardSize, Placement, PlacementResult, ShapeFlags
from ..utils.logger import get_logger
from .board import Board
from .letters import arrange
from .shapes import generate_placements


LOGGER = get_logger(__name__)

NO_PLACEMENTS = "no valid placements found"
MAX_ATTEMPTS_EXCEEDED = "max attempts exceeded"


class PlacementEngine:
    """Places one word at a time onto a board.

    Candidates are drawn uniformly at random from the geometric pool until one
    fits the letters already on the board or the attempt budget runs out. The
    pool for a given word length is computed once and reused across attempts
    and across words of the same length.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ) -> None:
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self._candidates: Dict[Tuple[int, BoardSize, ShapeFlags], List[Placement]] = {}

    def candidates(self, length: int, size: BoardSize, lines: ShapeFlags) -> List[Placement]:
        key = (length, size, lines)
        pool = self._candidates.get(key)
        if pool is None:
            pool = generate_placements(length, size, lines)
            self._candidates[key] = pool
            LOGGER.debug("Enumerated %d candidate placements for length %d", len(pool), length)
        return pool

    def place(self, board: Board, word: str, alignment: AlignmentConfig) -> PlacementResult:
        pool = self.candidates(len(word), board.size, alignment.lines)
        if not pool:
            return PlacementResult(success=False, reason=NO_PLACEMENTS)

        for attempt in range(1, self.max_attempts + 1):
            placement = self.rng.choice(pool)
            letters = arrange(word, alignment.direction, self.rng)
            if not self._fits(board, placement, letters):
                continue
            for position, letter in zip(placement.positions, letters):
                board.write(position, letter)
            LOGGER.debug(
                "Placed %r as %s after %d attempt(s)",
                word,
                placement.type.value,
                attempt,
            )
            return PlacementResult(
                success=True,
                placement=placement,
                letters=letters,
                attempts=attempt,
            )

        return PlacementResult(
            success=False,
            reason=MAX_ATTEMPTS_EXCEEDED,
            attempts=self.max_attempts,
        )

    @staticmethod
    def _fits(board: Board, placement: Placement, letters: str) -> bool:
        return all(
            board.can_accept(position, letter)
            for position, letter in zip(placement.positions, letters)
        )
