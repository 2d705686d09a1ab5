"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, word lists and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ANSWER_LENGTH,
    DEFAULT_TARGET_WORD,
    FALLBACK_WORDS,
    MAX_ROUNDS,
    WORD_LIST,
    is_well_formed_word,
    validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ANSWER_LENGTH', 'MAX_ROUNDS', 'WORD_LIST', 'FALLBACK_WORDS', 'DEFAULT_TARGET_WORD',
    'is_well_formed_word', 'validate_word_list_integrity',
]
