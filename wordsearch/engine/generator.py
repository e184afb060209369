"""Main word search generator orchestration.

Validates the inputs, allocates an empty board, then feeds the words through
the placement engine strictly in input order. Words that cannot be placed are
logged and skipped; later words still get their turn.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..core.constants import MAX_PLACEMENT_ATTEMPTS
from ..core.exceptions import PlacementError
from ..core.models import (AlignmentConfig, BoardSize, FailedWord, GenerationResult,
                           PlacedWord)
from ..utils.logger import get_logger
from .board import Board
from .placement import PlacementEngine
from .validator import validate_inputs


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    board_size: Union[BoardSize, Mapping[str, Any]]
    alignment: Union[AlignmentConfig, Mapping[str, Any]]
    seed: Optional[int] = None
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS


class WordSearchGenerator:
    """High-level orchestrator: validation, then sequential word placement."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.engine = PlacementEngine(self.rng, max_attempts=config.max_attempts)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str]) -> GenerationResult:
        inputs = validate_inputs(self.config.board_size, words, self.config.alignment)
        size = inputs.board_size
        LOGGER.info(
            "Generating %dx%d board for %d words (direction=%s)",
            size.width,
            size.height,
            len(inputs.words),
            inputs.alignment.direction.value,
        )

        board = Board.create(size)
        result = GenerationResult(board=[], seed=self.config.seed)
        for word in inputs.words:
            outcome = self.engine.place(board, word, inputs.alignment)
            try:
                outcome.raise_for_failure(word)
            except PlacementError as exc:
                LOGGER.warning("%s", exc)
                result.failed.append(FailedWord(word=word, reason=outcome.reason or ""))
                continue
            result.placed.append(
                PlacedWord(word=word, placement=outcome.placement, letters=outcome.letters)
            )

        result.board = board.rows()
        LOGGER.info(
            "Placed %d/%d words, %d cells filled",
            len(result.placed),
            len(inputs.words),
            board.filled_count,
        )
        return result


def generate_words_on_board(
    board_size: Union[BoardSize, Mapping[str, Any]],
    words: Sequence[str],
    alignment: Union[AlignmentConfig, Mapping[str, Any]],
    rng: Optional[random.Random] = None,
) -> List[List[str]]:
    """Place ``words`` on a fresh board and return its rows.

    Unused cells hold the empty string. Raises
    :class:`~wordsearch.core.exceptions.ConfigurationError` before any board is
    created when the inputs are malformed.
    """

    generator = WordSearchGenerator(GeneratorConfig(board_size=board_size, alignment=alignment), rng=rng)
    return generator.generate(words).board
