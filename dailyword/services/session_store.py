"""
Session Store

Reads and writes one day's progress through best-effort storage. Stored
content is treated as untrusted: guesses are sanitized on the way in and on
the way out, and anything that does not decode is treated as a fresh day.
"""

import json
import logging
import re
from typing import List, Optional

from ..config.game_settings import COLS, PLAYED_FLAG_VALUE, ROWS
from ..exceptions import StateCorrupt
from ..models.game import DayKeys, PersistedState
from ..storage.base import BestEffortStorage
from ..utils.game_logger import game_logger
from .daily_identity import keys

_NON_LETTERS = re.compile(r'[^a-zA-Z]')


def sanitize_guess(guess) -> str:
    """Keep only ASCII letters, lower-cased. Non-strings become empty."""
    if not isinstance(guess, str):
        return ''
    return _NON_LETTERS.sub('', guess).lower()


def _bounded_int(value, upper: int, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value if 0 <= value <= upper else default


def encode_state(state: PersistedState) -> str:
    """Serialize a persisted state to its stored JSON form."""
    payload = {
        'guesses': [sanitize_guess(g) for g in state.guesses],
        'cursorRow': state.cursor_row,
        'cursorCol': state.cursor_col,
    }
    return json.dumps(payload, separators=(',', ':'))


def decode_state(raw: str) -> PersistedState:
    """
    Parse a stored record.
    
    Raises:
        StateCorrupt: If the record is not JSON or has no guess list
    """
    try:
        obj = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise StateCorrupt(f"Stored state is not valid JSON: {e}") from e
    
    if not isinstance(obj, dict) or not isinstance(obj.get('guesses'), list):
        raise StateCorrupt("Stored state has no guess list")
    
    guesses: List[str] = [sanitize_guess(g) for g in obj['guesses']][:ROWS]
    return PersistedState(
        guesses=guesses,
        cursor_row=_bounded_int(obj.get('cursorRow'), ROWS, len(guesses)),
        cursor_col=_bounded_int(obj.get('cursorCol'), COLS, 0),
    )


class SessionStore:
    """Persistence for a single day's session and its played flag."""

    def __init__(self, storage: BestEffortStorage, day: str):
        self.storage = storage
        self.day = day
        self.keys: DayKeys = keys(day)

    def save(self, session) -> bool:
        """
        Persist the guesses and cursor of ``session``.
        
        Returns:
            bool: False if the write was dropped
        """
        state = PersistedState(
            guesses=list(session.guesses),
            cursor_row=session.cursor_row,
            cursor_col=session.cursor_col,
        )
        return self.storage.set(self.keys.state_key, encode_state(state))

    def load(self) -> Optional[PersistedState]:
        """Stored progress for the day, or None when there is nothing usable."""
        raw = self.storage.get(self.keys.state_key)
        if not raw:
            return None
        try:
            return decode_state(raw)
        except StateCorrupt as e:
            game_logger.log_game_event(
                self.day, 'state_corrupt', level=logging.WARNING, error_message=str(e)
            )
            return None

    def is_played(self) -> bool:
        return self.storage.get(self.keys.played_key) == PLAYED_FLAG_VALUE

    def mark_played(self) -> bool:
        return self.storage.set(self.keys.played_key, PLAYED_FLAG_VALUE)

    def clear_played(self) -> bool:
        return self.storage.remove(self.keys.played_key)
