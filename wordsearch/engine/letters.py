"""Letter mapping: which character lands on each index of a placement."""

from __future__ import annotations

import random

from ..core.constants import DirectionMode


def letter_for(word: str, index: int, mode: DirectionMode, rng: random.Random) -> str:
    """Return the character for ``index`` with randomness re-drawn per call.

    ``forwardBackward`` and ``scatter`` flip their coin or reshuffle on every
    call, so two calls for the same index may disagree. Use :func:`arrange`
    when a whole placement must be consistent.
    """

    if mode == DirectionMode.FORWARD:
        return word[index]
    if mode == DirectionMode.BACKWARD:
        return word[len(word) - 1 - index]
    if mode == DirectionMode.FORWARD_BACKWARD:
        return word[index] if rng.random() < 0.5 else word[len(word) - 1 - index]
    if mode == DirectionMode.SCATTER:
        return _scatter(word, rng)[index]
    raise ValueError(f"Unknown direction mode: {mode!r}")


def arrange(word: str, mode: DirectionMode, rng: random.Random) -> str:
    """Resolve the full character order for one placement attempt."""

    if mode == DirectionMode.FORWARD:
        return word
    if mode == DirectionMode.BACKWARD:
        return word[::-1]
    if mode == DirectionMode.FORWARD_BACKWARD:
        return word if rng.random() < 0.5 else word[::-1]
    if mode == DirectionMode.SCATTER:
        return _scatter(word, rng)
    raise ValueError(f"Unknown direction mode: {mode!r}")


def _scatter(word: str, rng: random.Random) -> str:
    letters = list(word)
    rng.shuffle(letters)
    return "".join(letters)
