"""
Game Session

The state machine for one day's game. The session owns the committed guesses
and the row being typed; lock status and outcome are always derived from the
guesses themselves, never trusted from storage.
"""

import re
from typing import List, Optional

from ..config.game_settings import COLS, ROWS
from ..exceptions import InvalidInput
from ..models.game import GameState, GameStatus, GuessResult, PersistedState, Provenance
from ..storage.base import BestEffortStorage
from ..utils.game_logger import game_logger
from .daily_identity import today
from .scorer import keyboard_status, score
from .session_store import SessionStore
from .solution_provider import NOTICES, SolutionProvider

_GUESS_PATTERN = re.compile(rf'[a-zA-Z]{{{COLS}}}')
_LETTER_PATTERN = re.compile(r'[a-zA-Z]')


class GameSession:
    """
    One player's game for one day.

    This class handles:
    - Letter entry within the current row
    - Guess validation, scoring and win/loss transitions
    - Saving after every committed guess
    - Reconciling the stored "played today" flag with the restored guesses
    """

    def __init__(self,
                 day: str,
                 solution: str,
                 store: SessionStore,
                 provenance: Provenance = Provenance.LIVE):
        self.day = day
        self.solution = solution.lower()
        self.store = store
        self.provenance = provenance
        self.guesses: List[str] = []
        self.current: List[str] = []  # Letters typed into the row under the cursor
        self.status = GameStatus.ACTIVE

    @classmethod
    def start(cls,
              storage: BestEffortStorage,
              provider: SolutionProvider,
              day: Optional[str] = None) -> 'GameSession':
        """
        Build the session for ``day`` (today by default).

        Resolves the solution, restores saved progress and reconciles the
        played flag, in that order.
        """
        if day is None:
            day = today()

        solution, provenance = provider.resolve(day)
        session = cls(day, solution, SessionStore(storage, day), provenance)
        session.restore(session.store.load())
        session.reconcile_played_flag()

        game_logger.log_game_event(
            day, 'session_started',
            provenance=provenance.value,
            restored_guesses=len(session.guesses),
            status=session.status.value
        )
        return session

    @property
    def locked(self) -> bool:
        return self.status != GameStatus.ACTIVE

    @property
    def cursor_row(self) -> int:
        return len(self.guesses)

    @property
    def cursor_col(self) -> int:
        return len(self.current)

    @property
    def revealed_solution(self) -> Optional[str]:
        """The solution, once there is nothing left to guess."""
        return self.solution if self.locked else None

    @property
    def notice(self) -> Optional[str]:
        if self.status == GameStatus.WON:
            return "You Win"
        if self.status == GameStatus.LOST:
            return f"Out of guesses. Solution: {self.solution.upper()}"
        return NOTICES[self.provenance]

    def restore(self, state: Optional[PersistedState]) -> None:
        """
        Rebuild the board from stored progress.

        Complete guesses are replayed up to and including a winning one.
        Over-long entries are skipped. The first incomplete entry, if any,
        becomes the row being typed and anything after it is dropped.
        """
        self.guesses = []
        self.current = []
        self.status = GameStatus.ACTIVE
        if state is None:
            return

        for guess in state.guesses[:ROWS]:
            if len(guess) > COLS:
                continue
            if len(guess) < COLS:
                self.current = list(guess)
                break
            self.guesses.append(guess)
            if guess == self.solution:
                break

    def _evidence(self) -> GameStatus:
        if self.solution in self.guesses:
            return GameStatus.WON
        if len(self.guesses) >= ROWS:
            return GameStatus.LOST
        return GameStatus.ACTIVE

    def reconcile_played_flag(self) -> GameStatus:
        """
        Decide whether today's game is over from the guesses, not the flag.

        A played flag backed by a win or an exhausted board locks the session.
        A played flag with no such evidence is stale (the game was closed
        mid-row) and is cleared. A finished board with no flag gets one.
        """
        evidence = self._evidence()
        played = self.store.is_played()

        if evidence != GameStatus.ACTIVE:
            self.status = evidence
            self.current = []
            if not played:
                self.store.mark_played()
        else:
            self.status = GameStatus.ACTIVE
            if played:
                self.store.clear_played()
                game_logger.log_game_event(
                    self.day, 'played_flag_cleared', guesses=len(self.guesses)
                )

        return self.status

    def append_letter(self, letter: str) -> bool:
        """
        Type one letter into the current row.

        Returns:
            bool: False when locked or the row is already full

        Raises:
            InvalidInput: If ``letter`` is not a single ASCII letter
        """
        if self.locked:
            return False
        if not isinstance(letter, str) or not _LETTER_PATTERN.fullmatch(letter):
            raise InvalidInput("Invalid letter")
        if len(self.current) >= COLS:
            return False

        self.current.append(letter.lower())
        return True

    def remove_last_letter(self) -> bool:
        """Erase the last typed letter. False when locked or the row is empty."""
        if self.locked or not self.current:
            return False

        self.current.pop()
        return True

    def submit_guess(self, letters: Optional[str] = None) -> Optional[GuessResult]:
        """
        Commit a guess, by default the row typed so far.

        Args:
            letters: Explicit guess; replaces the typed row when given

        Returns:
            GuessResult, or None when the game is already over

        Raises:
            InvalidInput: If the guess is not exactly COLS letters
        """
        if self.locked:
            return None

        guess = ''.join(self.current) if letters is None else letters
        if not isinstance(guess, str):
            raise InvalidInput("Invalid guess")
        if len(guess) < COLS:
            raise InvalidInput("Not enough letters")
        if not _GUESS_PATTERN.fullmatch(guess):
            raise InvalidInput("Invalid guess")

        guess = guess.lower()
        statuses = score(guess, self.solution)
        self.guesses.append(guess)
        self.current = []
        self.status = self._evidence()

        self.store.save(self)

        if self.locked:
            self.store.mark_played()
            game_logger.log_game_event(
                self.day,
                'game_won' if self.status == GameStatus.WON else 'game_lost',
                rounds_used=len(self.guesses),
                target_word=self.solution,
                final_guess=guess
            )

        return GuessResult(
            guess=guess,
            statuses=statuses,
            status=self.status,
            solution=self.revealed_solution
        )

    def get_state(self) -> GameState:
        """Snapshot for the rendering layer (solution hidden until the game is over)."""
        return GameState(
            day=self.day,
            status=self.status.value,
            locked=self.locked,
            rows=ROWS,
            cols=COLS,
            cursor_row=self.cursor_row,
            cursor_col=self.cursor_col,
            guesses=list(self.guesses),
            guess_results=[[s.value for s in score(g, self.solution)] for g in self.guesses],
            current_row=''.join(self.current),
            letter_status={
                letter: status.value
                for letter, status in keyboard_status(self.guesses, self.solution).items()
            },
            provenance=self.provenance.value,
            notice=self.notice,
            solution=self.revealed_solution
        )
