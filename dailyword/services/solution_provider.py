"""
Solution Provider

Resolves today's solution: a live fetch first, then the copy cached by an
earlier successful fetch, then a fixed default word so the game is always
playable.
"""

import logging
from typing import Callable, Optional, Tuple

import requests

from ..config.game_settings import DEFAULT_SOLUTION, is_valid_word
from ..exceptions import ProviderUnavailable
from ..models.game import Provenance
from ..storage.base import BestEffortStorage
from ..utils.game_logger import game_logger
from .daily_identity import keys, today

NOTICES = {
    Provenance.LIVE: None,
    Provenance.CACHED: "Offline: using cached solution",
    Provenance.FALLBACK: "Offline: using fallback solution",
}


def extract_solution(payload) -> str:
    """
    Pull the solution word out of a decoded response payload.
    
    Accepts ``{"solution": ...}`` or a list whose first item has that shape.
    
    Raises:
        ProviderUnavailable: If the payload has no usable word
    """
    if isinstance(payload, list) and payload:
        payload = payload[0]
    word = payload.get("solution") if isinstance(payload, dict) else None
    if not isinstance(word, str):
        raise ProviderUnavailable("Unexpected payload: no solution field")
    word = word.strip().lower()
    if not is_valid_word(word):
        raise ProviderUnavailable(f"Unexpected payload: '{word}' is not a valid solution")
    return word


class HttpSolutionFetcher:
    """Fetches the daily solution from a JSON endpoint such as the NYT Wordle API."""

    def __init__(self, url_template: str, timeout: float = 5.0):
        self.url_template = url_template
        self.timeout = timeout

    def __call__(self, day: str) -> str:
        url = self.url_template.format(day=day)
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ProviderUnavailable(f"Failed to fetch {url}: {e}") from e
        except ValueError as e:
            raise ProviderUnavailable(f"Invalid JSON from {url}: {e}") from e
        return extract_solution(payload)


class SolutionProvider:
    """Resolves the solution for a day and keeps the offline copy up to date."""

    def __init__(self,
                 fetcher: Callable[[str], str],
                 storage: BestEffortStorage,
                 default_solution: str = DEFAULT_SOLUTION):
        self.fetcher = fetcher
        self.storage = storage
        self.default_solution = default_solution

    def resolve(self, day: Optional[str] = None) -> Tuple[str, Provenance]:
        """
        Resolve the solution for ``day`` (today by default).
        
        Makes at most one fetch attempt and never raises.
        
        Returns:
            Tuple of (solution, provenance)
        """
        if day is None:
            day = today()
        solution_key = keys(day).solution_key
        
        try:
            word = self.fetcher(day)
            if not is_valid_word(word):
                raise ProviderUnavailable(f"Fetcher returned an invalid solution '{word}'")
        except ProviderUnavailable as e:
            game_logger.log_game_event(
                day, 'solution_fetch_failed', level=logging.WARNING, error_message=str(e)
            )
        else:
            word = word.lower()
            self.storage.set(solution_key, word)
            game_logger.log_game_event(day, 'solution_resolved', provenance=Provenance.LIVE.value)
            return word, Provenance.LIVE
        
        cached = self.storage.get(solution_key)
        if cached is not None and is_valid_word(cached):
            game_logger.log_game_event(day, 'solution_resolved', provenance=Provenance.CACHED.value)
            return cached.lower(), Provenance.CACHED
        
        game_logger.log_game_event(
            day, 'solution_resolved', level=logging.WARNING, provenance=Provenance.FALLBACK.value
        )
        return self.default_solution, Provenance.FALLBACK
