"""
Services Package

Contains the game core (scoring and sessions), word sources and the
service that wires them to the adapters.
"""

from .scoring import score
from .word_source import LocalWordSource, RemoteWordSource, WordSource, select_target_word
from .game_session import GameSession
from .game_service import GameService

__all__ = [
    'score',
    'WordSource', 'LocalWordSource', 'RemoteWordSource', 'select_target_word',
    'GameSession', 'GameService',
]
