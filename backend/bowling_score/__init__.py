"""Ten-pin bowling score keeping."""

from .config import configure_logging
from .exceptions import (
    BowlingError,
    FrameOverflow,
    InvalidInput,
    InvalidPinCount,
    ProblemDetail,
    TooManyRolls,
    UnfinishedGame,
)
from .game import FrameCursor, Game

__all__ = [
    "BowlingError",
    "FrameCursor",
    "FrameOverflow",
    "Game",
    "InvalidInput",
    "InvalidPinCount",
    "ProblemDetail",
    "TooManyRolls",
    "UnfinishedGame",
    "configure_logging",
]
