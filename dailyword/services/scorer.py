"""
Guess Scorer

Implements the Wordle letter evaluation algorithm.
"""

from typing import Dict, Iterable, List, Optional

from ..models.game import LetterStatus

_PRIORITY = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


def score(guess: str, solution: str) -> List[LetterStatus]:
    """
    Compare a guess with the solution position by position.
    
    Exact matches are resolved first and consume their solution letter, so a
    repeated guess letter is only marked PRESENT while unmatched copies of it
    remain in the solution.
    
    Args:
        guess: Word of the same length as the solution
        solution: Today's solution
        
    Returns:
        List of LetterStatus, one per position
    """
    guess = guess.lower()
    solution = solution.lower()
    if len(guess) != len(solution):
        raise ValueError(f"Guess '{guess}' and solution differ in length")
    
    remaining: List[Optional[str]] = list(solution)
    result: List[Optional[LetterStatus]] = [None] * len(guess)
    
    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == remaining[i]:
            result[i] = LetterStatus.CORRECT
            remaining[i] = None
    
    # Second pass: displaced letters drawn from what is left
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in remaining:
            result[i] = LetterStatus.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            result[i] = LetterStatus.ABSENT
    
    return result  # type: ignore[return-value]


def keyboard_status(guesses: Iterable[str], solution: str) -> Dict[str, LetterStatus]:
    """
    Best status seen for every guessed letter across all guesses.
    
    Status can only progress in priority order: ABSENT < PRESENT < CORRECT.
    """
    letters: Dict[str, LetterStatus] = {}
    for guess in guesses:
        for letter, status in zip(guess.lower(), score(guess, solution)):
            current = letters.get(letter)
            if current is None or _PRIORITY[status] > _PRIORITY[current]:
                letters[letter] = status
    return letters
