"""
Key-Value Storage Interface

Backends store plain strings under string keys. Every backend reports
failures as PersistenceUnavailable; BestEffortStorage is the single place
where those failures are swallowed.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..exceptions import PersistenceUnavailable
from ..utils.game_logger import game_logger


class KeyValueStorage(ABC):
    """Durable string storage, the server-side stand-in for browser localStorage."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key`` or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``. Missing keys are not an error."""


class MemoryStorage(KeyValueStorage):
    """Process-local storage. Used for testing and as a no-durability fallback."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise PersistenceUnavailable(f"Cannot store non-string value for '{key}'")
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class BestEffortStorage:
    """
    Wraps a backend so that reads and writes never raise.
    
    A failed read behaves like a missing key and a failed write is dropped;
    both are logged as warnings so gameplay continues in memory.
    """

    def __init__(self, backend: KeyValueStorage):
        self.backend = backend

    def get(self, key: str) -> Optional[str]:
        try:
            return self.backend.get(key)
        except PersistenceUnavailable as e:
            self._warn('read', key, e)
            return None

    def set(self, key: str, value: str) -> bool:
        try:
            self.backend.set(key, value)
            return True
        except PersistenceUnavailable as e:
            self._warn('write', key, e)
            return False

    def remove(self, key: str) -> bool:
        try:
            self.backend.remove(key)
            return True
        except PersistenceUnavailable as e:
            self._warn('remove', key, e)
            return False

    def _warn(self, operation: str, key: str, error: Exception):
        game_logger.log_game_event(
            None, 'storage_unavailable', level=logging.WARNING,
            operation=operation, key=key, error_message=str(error)
        )
