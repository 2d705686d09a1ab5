"""
Utilities Package

Contains logging and input helper modules.
"""

from .helpers import is_letter
from .game_logger import GameLogger, game_logger

__all__ = ['is_letter', 'GameLogger', 'game_logger']
