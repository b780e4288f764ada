"""
Errors raised by the host-facing layers.

The engine itself never raises for a rejected interaction: it answers False and leaves the state untouched.
"""


class GameError(Exception):
    """Base class of everything raised on purpose in this package"""


class GameStateError(GameError):
    """A stored game cannot be turned back into a consistent engine state"""


class RepositoryError(GameError):
    """The requested game is not (or no longer) stored"""


class InvalidRequestError(GameError, ValueError):
    """
    A request could not be interpreted.
    (Also a ValueError, so pydantic validators report it as a regular ValidationError)
    """
