"""
Game Service

Owns the session for the current day and swaps it out when the date changes.
"""

import threading
from typing import Optional, Union

from ..models.game import GameState, GuessResult
from ..storage.base import BestEffortStorage, KeyValueStorage
from .daily_identity import today
from .game_session import GameSession
from .solution_provider import SolutionProvider


class GameService:
    """
    Core game service managing today's session.
    
    This class handles:
    - Lazy construction of the session on first use each day
    - Day rollover (yesterday's session is dropped, never mutated)
    - Serialising access so concurrent requests see one consistent board
    """
    
    def __init__(self, storage: Union[KeyValueStorage, BestEffortStorage], provider: SolutionProvider):
        if not isinstance(storage, BestEffortStorage):
            storage = BestEffortStorage(storage)
        self.storage = storage
        self.provider = provider
        self.session: Optional[GameSession] = None
        self._lock = threading.RLock()
    
    def current_session(self) -> GameSession:
        """Session for today, built on first use and after midnight."""
        with self._lock:
            day = today()
            if self.session is None or self.session.day != day:
                self.session = GameSession.start(self.storage, self.provider, day)
            return self.session
    
    def get_game_state(self) -> GameState:
        with self._lock:
            return self.current_session().get_state()
    
    def append_letter(self, letter: str) -> GameState:
        with self._lock:
            session = self.current_session()
            session.append_letter(letter)
            return session.get_state()
    
    def remove_last_letter(self) -> GameState:
        with self._lock:
            session = self.current_session()
            session.remove_last_letter()
            return session.get_state()
    
    def submit_guess(self, guess: Optional[str] = None) -> Optional[GuessResult]:
        """
        Submit a guess to today's session.
        
        Returns:
            GuessResult, or None if today's game is already over
        """
        with self._lock:
            return self.current_session().submit_guess(guess)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(storage: Union[KeyValueStorage, BestEffortStorage], provider: SolutionProvider) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(storage, provider)
    return _game_service
