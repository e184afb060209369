"""Input validation performed before any board is allocated."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List

from ..core.constants import UNSUPPORTED_BLOCK_LENGTHS, DirectionMode
from ..core.exceptions import ConfigurationError
from ..core.models import AlignmentConfig, BoardSize, ShapeFlags
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidatedInputs:
    board_size: BoardSize
    words: List[str]
    alignment: AlignmentConfig


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_board_size(board_size: Any) -> BoardSize:
    if isinstance(board_size, Mapping):
        width, height = board_size.get("width"), board_size.get("height")
    elif isinstance(board_size, BoardSize):
        width, height = board_size.width, board_size.height
    else:
        raise ConfigurationError(
            "board_size must be a BoardSize or a mapping with width and height"
        )
    if not _is_int(width) or not _is_int(height):
        raise ConfigurationError(
            f"board_size width and height must be integers, got {width!r} x {height!r}"
        )
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"board_size must be positive, got {width}x{height}")
    return BoardSize(width=width, height=height)


def validate_words(words: Any) -> List[str]:
    if not isinstance(words, (list, tuple)):
        raise ConfigurationError("words must be a list or tuple of strings")
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise ConfigurationError(f"Word at index {index} is not a string: {word!r}")
        if not word:
            raise ConfigurationError(f"Word at index {index} is empty")
    return list(words)


def validate_alignment(alignment: Any) -> AlignmentConfig:
    if isinstance(alignment, AlignmentConfig):
        lines, direction = alignment.lines, alignment.direction
    elif isinstance(alignment, Mapping):
        lines, direction = alignment.get("lines"), alignment.get("direction")
    else:
        raise ConfigurationError("alignment must have lines and direction")

    if isinstance(lines, Mapping):
        try:
            lines = ShapeFlags.from_mapping(lines)
        except KeyError as exc:
            raise ConfigurationError(f"Unknown shape category: {exc.args[0]!r}") from exc
    if not isinstance(lines, ShapeFlags):
        raise ConfigurationError("alignment.lines must be a mapping of shape flags")
    if not lines.any_enabled():
        raise ConfigurationError("alignment.lines must enable at least one shape")

    try:
        direction = DirectionMode(direction)
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in DirectionMode)
        raise ConfigurationError(
            f"alignment.direction must be one of {allowed}, got {direction!r}"
        ) from exc
    return AlignmentConfig(lines=lines, direction=direction)


def check_block_lengths(words: List[str], alignment: AlignmentConfig) -> None:
    if not alignment.lines.block:
        return
    for word in words:
        if len(word) in UNSUPPORTED_BLOCK_LENGTHS:
            lengths = ", ".join(str(n) for n in sorted(UNSUPPORTED_BLOCK_LENGTHS))
            raise ConfigurationError(
                f"Word {word!r} has invalid length {len(word)} for block mode. "
                f"Lengths {lengths} are not allowed."
            )


def validate_inputs(board_size: Any, words: Any, alignment: Any) -> ValidatedInputs:
    """Normalize raw inputs, raising :class:`ConfigurationError` on any defect."""

    size = validate_board_size(board_size)
    word_list = validate_words(words)
    config = validate_alignment(alignment)
    check_block_lengths(word_list, config)
    LOGGER.debug(
        "Validated %dx%d board, %d words, direction=%s",
        size.width,
        size.height,
        len(word_list),
        config.direction.value,
    )
    return ValidatedInputs(board_size=size, words=word_list, alignment=config)
