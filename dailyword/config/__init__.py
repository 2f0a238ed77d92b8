"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ROWS, COLS, DEFAULT_SOLUTION, PLAYED_FLAG_VALUE,
    is_valid_word, validate_game_settings
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ROWS', 'COLS', 'DEFAULT_SOLUTION', 'PLAYED_FLAG_VALUE',
    'is_valid_word', 'validate_game_settings'
]
