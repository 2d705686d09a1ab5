"""
Helper Functions

Contains input helpers shared by the session and the adapters.
"""

from typing import Any


def is_letter(value: Any) -> bool:
    """True for exactly one ASCII letter, either case."""
    return isinstance(value, str) and len(value) == 1 and value.isascii() and value.isalpha()
