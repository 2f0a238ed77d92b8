"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class LetterStatus(Enum):
    """Letter evaluation status for one guess position."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class GameStatus(Enum):
    """Session states. Only ACTIVE accepts input."""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class Provenance(Enum):
    """Where today's solution came from."""
    LIVE = "live"
    CACHED = "cached"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class DayKeys:
    """Storage keys for one calendar day."""
    solution_key: str
    state_key: str
    played_key: str


@dataclass
class PersistedState:
    """Stored projection of a session. Outcome is never stored, only re-derived."""
    guesses: List[str]
    cursor_row: int = 0
    cursor_col: int = 0


@dataclass
class GuessResult:
    """Outcome of one committed guess."""
    guess: str
    statuses: List[LetterStatus]
    status: GameStatus
    solution: Optional[str] = None  # Only set once the game is over


@dataclass
class GameState:
    """Read-only view of a session for the rendering layer."""
    day: str
    status: str
    locked: bool
    rows: int
    cols: int
    cursor_row: int
    cursor_col: int
    guesses: List[str]
    guess_results: List[List[str]]
    current_row: str
    letter_status: Dict[str, str] = field(default_factory=dict)
    provenance: str = Provenance.LIVE.value
    notice: Optional[str] = None
    solution: Optional[str] = None  # Only included when game is over
