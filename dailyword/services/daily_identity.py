"""
Daily Identity

Every persisted value is namespaced by the local calendar date, so a new day
starts from nothing and old days are never read back.
"""

from datetime import date, datetime
from typing import Optional, Union

from ..config.game_settings import PLAYED_KEY_PREFIX, SOLUTION_KEY_PREFIX, STATE_KEY_PREFIX
from ..models.game import DayKeys


def today(now: Optional[Union[date, datetime]] = None) -> str:
    """Local date as ``YYYY-MM-DD``; ``now`` defaults to the current local time."""
    if now is None:
        now = datetime.now()
    if isinstance(now, datetime):
        now = now.date()
    return f"{now.year:04d}-{now.month:02d}-{now.day:02d}"


def keys(day: str) -> DayKeys:
    """Storage keys for the given day identity."""
    return DayKeys(
        solution_key=f"{SOLUTION_KEY_PREFIX}{day}",
        state_key=f"{STATE_KEY_PREFIX}{day}",
        played_key=f"{PLAYED_KEY_PREFIX}{day}",
    )
