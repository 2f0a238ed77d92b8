"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    DayKeys, GameState, GameStatus, GuessResult, LetterStatus,
    PersistedState, Provenance
)

__all__ = [
    'DayKeys', 'GameState', 'GameStatus', 'GuessResult', 'LetterStatus',
    'PersistedState', 'Provenance'
]
