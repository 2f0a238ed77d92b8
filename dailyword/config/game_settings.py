"""
Game Configuration Constants Module

Rules of the daily game and the naming scheme for everything it persists.
All game parameters are centralized here to enable easy modification.
"""

from typing import Final

ROWS: Final[int] = 6
"""
Maximum number of guess attempts allowed per day.
Type: Final[int] - Immutable to prevent accidental modification
"""

COLS: Final[int] = 5
"""Number of letters in every guess and in the solution."""

DEFAULT_SOLUTION: Final[str] = "crane"
"""Word played when neither a live fetch nor a cached solution is available."""

# Storage key prefixes, each suffixed with the day identity (YYYY-MM-DD)
STATE_KEY_PREFIX: Final[str] = "wordle-popup-"
SOLUTION_KEY_PREFIX: Final[str] = "wordle-solution-"
PLAYED_KEY_PREFIX: Final[str] = "wordle-played-"

PLAYED_FLAG_VALUE: Final[str] = "true"


def is_valid_word(word) -> bool:
    """True when ``word`` is a string of exactly COLS ASCII letters."""
    return (
        isinstance(word, str)
        and len(word) == COLS
        and word.isascii()
        and word.isalpha()
    )


def validate_game_settings() -> bool:
    """
    Validates the consistency of the game rules.
    
    Returns:
        bool: True if the settings pass all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if ROWS < 1:
        raise ValueError(f"ROWS must be positive, got {ROWS}")
    
    if COLS < 1:
        raise ValueError(f"COLS must be positive, got {COLS}")
    
    if not is_valid_word(DEFAULT_SOLUTION):
        raise ValueError(f"Default solution '{DEFAULT_SOLUTION}' is not a {COLS}-letter word")
    
    if not DEFAULT_SOLUTION.islower():
        raise ValueError(f"Default solution '{DEFAULT_SOLUTION}' is not in lowercase format")
    
    prefixes = [STATE_KEY_PREFIX, SOLUTION_KEY_PREFIX, PLAYED_KEY_PREFIX]
    if len(prefixes) != len(set(prefixes)):
        raise ValueError(f"Storage key prefixes must be distinct: {prefixes}")
    
    return True


# Module initialization: Validate configuration on import
if __name__ == "__main__":

    try:
        validate_game_settings()
        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
