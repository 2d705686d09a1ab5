"""
Data Models Package

Contains all data models and event types used throughout the application.
"""

from .game import CellOutcome, GameState, GameStatus, LetterStatus, RoundResult
from .events import (
    CellUpdated,
    GameEnded,
    GameEvent,
    InvalidWordFlagged,
    LoadingChanged,
    RowScored,
)

__all__ = [
    'CellOutcome', 'GameState', 'GameStatus', 'LetterStatus', 'RoundResult',
    'GameEvent', 'CellUpdated', 'RowScored', 'InvalidWordFlagged', 'GameEnded', 'LoadingChanged',
]
