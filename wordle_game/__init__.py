from wordle_game.engine import (
    DEFAULT_MAX_TRIES,
    BoardSnapshot,
    GuessEngine,
    GuessError,
    InvalidWordError,
    Mark,
    RejectReason,
    RowSnapshot,
    WrongLengthError,
)

__all__ = [
    "DEFAULT_MAX_TRIES",
    "BoardSnapshot",
    "GuessEngine",
    "GuessError",
    "InvalidWordError",
    "Mark",
    "RejectReason",
    "RowSnapshot",
    "WrongLengthError",
]
