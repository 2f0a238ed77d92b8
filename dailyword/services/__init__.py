"""
Services Package

Contains all business logic and service classes.
"""

from .daily_identity import keys, today
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .scorer import keyboard_status, score
from .session_store import SessionStore
from .solution_provider import HttpSolutionFetcher, SolutionProvider

__all__ = [
    'keys', 'today',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession',
    'keyboard_status', 'score',
    'SessionStore',
    'HttpSolutionFetcher', 'SolutionProvider'
]
