"""
Game Configuration Constants Module

Board dimensions, the bundled word list and the fallback words used when
the remote word source is unreachable.
"""

import json
import os
from typing import Final, List, Optional, Sequence

ANSWER_LENGTH: Final[int] = 5
"""Number of letters in the target word and in every guess."""

MAX_ROUNDS: Final[int] = 6
"""Maximum number of guess attempts allowed per game."""

FALLBACK_WORDS: Final[List[str]] = ["APPLE", "BREAD", "CRANE", "PLACE", "GHOST", "TRAIN"]
"""Used for the target word when the word source cannot provide one."""

DEFAULT_TARGET_WORD: Final[str] = "PLACE"
"""Used when the word source answers but omits the word."""


def _load_word_list() -> List[str]:
    """
    Load word list from words.json file.

    Returns:
        List[str]: List of uppercase words

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If the file is malformed or the list is empty
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    return [word.upper() for word in word_list]


# Curated word database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def is_well_formed_word(word: str, answer_length: int = ANSWER_LENGTH) -> bool:
    """True for an uppercase ASCII word of exactly answer_length letters."""
    return (
        isinstance(word, str)
        and len(word) == answer_length
        and word.isascii()
        and word.isalpha()
        and word.isupper()
    )


def validate_word_list_integrity(words: Optional[Sequence[str]] = None,
                                 answer_length: int = ANSWER_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    Checks that every word has exactly answer_length uppercase alphabetic
    characters and that there are no duplicates.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if words is None:
        words = WORD_LIST

    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not is_well_formed_word(word, answer_length):
            raise ValueError(
                f"Word at index {index} '{word}' is not {answer_length} uppercase letters"
            )

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if list(words).count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True
