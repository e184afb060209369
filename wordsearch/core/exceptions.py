"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordSearchError):
    """Raised when board size, words or alignment are malformed."""


class PlacementError(WordSearchError):
    """Raised when a word cannot be placed on the board."""


class OutOfBoundsError(WordSearchError, IndexError):
    """Raised when a coordinate outside the board is queried."""
