"""Word search board generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.generate_words_on_board``: one-call board generation.
- ``wordsearch.engine.generator.WordSearchGenerator``: orchestrates placement
  and reports which words were placed or skipped.
- ``wordsearch.utils.pretty`` helpers: text rendering of finished boards.
"""

from .core.constants import DirectionMode, PlacementType
from .core.exceptions import ConfigurationError, OutOfBoundsError, PlacementError, WordSearchError
from .core.models import AlignmentConfig, BoardSize, GenerationResult, ShapeFlags
from .engine.generator import GeneratorConfig, WordSearchGenerator, generate_words_on_board

__all__ = [
    "AlignmentConfig",
    "BoardSize",
    "ConfigurationError",
    "DirectionMode",
    "GenerationResult",
    "GeneratorConfig",
    "OutOfBoundsError",
    "PlacementError",
    "PlacementType",
    "ShapeFlags",
    "WordSearchError",
    "WordSearchGenerator",
    "generate_words_on_board",
]

__version__ = "0.1.0"
