"""
Scoring Engine

Pure guess evaluation against a target word.
"""

from typing import Dict, List, Optional, Sequence

from ..exceptions import InvalidInputError
from ..models.game import CellOutcome, LetterStatus, RoundResult


def _letter_counts(letters: Sequence[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for letter in letters:
        counts[letter] = counts.get(letter, 0) + 1
    return counts


def score(guess: Sequence[str], target: Sequence[str]) -> RoundResult:
    """
    Evaluates a guess against the target word.

    Exact position matches claim their share of a letter's supply before
    any PRESENT is handed out, so a letter guessed more often than it
    occurs in the target is only credited as many times as it occurs.

    Args:
        guess: The guessed letters, already case-normalized
        target: The target letters, same length as the guess

    Returns:
        RoundResult with one outcome per guess position

    Raises:
        InvalidInputError: If the lengths differ or are zero
    """
    if len(guess) != len(target):
        raise InvalidInputError(
            f"Guess length {len(guess)} does not match target length {len(target)}"
        )
    if not guess:
        raise InvalidInputError("Cannot score an empty guess")

    remaining = _letter_counts(target)
    result: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result[i] = LetterStatus.CORRECT
            remaining[letter] -= 1

    # Second pass: present or absent from what is left
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining.get(letter, 0) > 0:
            result[i] = LetterStatus.PRESENT
            remaining[letter] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return RoundResult(outcomes=tuple(
        CellOutcome(letter=letter, status=status)
        for letter, status in zip(guess, result)
    ))


def merge_letter_status(current: LetterStatus, new: LetterStatus) -> LetterStatus:
    """Keyboard status only moves forward: UNUSED < ABSENT < PRESENT < CORRECT."""
    if new == LetterStatus.CORRECT:
        return new
    if new == LetterStatus.PRESENT and current != LetterStatus.CORRECT:
        return new
    if new == LetterStatus.ABSENT and current == LetterStatus.UNUSED:
        return new
    return current
