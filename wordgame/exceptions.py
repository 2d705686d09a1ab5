"""
Game Exceptions

Errors raised by the game core and the word sources.
"""


class WordGameError(Exception):
    """Base class for all game errors."""


class InvalidInputError(WordGameError, ValueError):
    """Raised for malformed arguments that indicate a programming error."""


class WordSourceError(WordGameError):
    """Raised when a word source cannot be reached or returns garbage."""
