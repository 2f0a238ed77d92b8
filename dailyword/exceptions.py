"""
Game Exceptions

Error kinds raised by the game core. None of them is fatal to a session:
each one has a recovery path in the layer that catches it.
"""


class DailyWordError(Exception):
    """Base class for all game errors."""


class InvalidInput(DailyWordError):
    """Guess or letter rejected; the message is shown to the player."""


class ProviderUnavailable(DailyWordError):
    """Today's solution could not be fetched."""


class PersistenceUnavailable(DailyWordError):
    """The key-value storage could not be read or written."""


class StateCorrupt(DailyWordError):
    """A persisted record could not be decoded."""
