import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_TRIES = 6
FILLER = "_"


class Mark(Enum):
    HIT = "hit"
    CONTAINS = "contains"
    MISS = "miss"
    # Only used for rows that have no feedback yet
    UNKNOWN = "unknown"


class RejectReason(Enum):
    WRONG_LENGTH = "Word is not the correct length"
    INVALID_WORD = "Word is not valid"

    def __str__(self) -> str:
        return self.value


class GuessError(Exception):
    """Raised when a submitted guess is rejected. The game can continue afterwards."""

    reason: RejectReason

    def __init__(self, guess: str):
        super().__init__(f"{self.reason}: {guess!r}")
        self.guess = guess


class WrongLengthError(GuessError):
    reason = RejectReason.WRONG_LENGTH


class InvalidWordError(GuessError):
    reason = RejectReason.INVALID_WORD


@dataclass(frozen=True)
class RowSnapshot:
    text: str
    marks: tuple[Mark, ...]


@dataclass(frozen=True)
class BoardSnapshot:
    rows: tuple[RowSnapshot, ...]
    last_error: Optional[RejectReason]
    width: int
    tries_left: int


class GuessEngine:

    def __init__(self, target: str, valid_words, max_tries: int = DEFAULT_MAX_TRIES):
        """
        Initializes the engine for a single game.

        Args:
            target (str): The hidden word. Its length fixes the length of every guess.
            valid_words (Iterable[str]): Words accepted as guesses. May contain words of other lengths.
            max_tries (int, optional): Number of rows on the board. Defaults to 6.

        Raises:
            ValueError: If the target is empty or max_tries is below 1.
        """

        if not target:
            raise ValueError("Target word must not be empty.")
        if max_tries < 1:
            raise ValueError(f"max_tries must be at least 1, got {max_tries}.")

        self._target = target
        self.valid_words = frozenset(valid_words)
        self.max_tries = max_tries

        self.buffer = ""
        self._guesses: list[str] = []
        self.last_error: Optional[RejectReason] = None

    @property
    def target(self) -> str:
        return self._target

    @property
    def length(self) -> int:
        return len(self._target)

    @property
    def guesses(self) -> tuple[str, ...]:
        return tuple(self._guesses)

    def append_char(self, c: str) -> None:
        if len(self.buffer) < self.length:
            self.buffer += c

    def backspace(self) -> None:
        self.buffer = self.buffer[:-1]

    def submit_guess(self, guess: str) -> bool:
        """
        Validates a guess and appends it to the history.

        The length is checked before membership in the word set, so a guess failing both
        is reported as the wrong length.

        Args:
            guess (str): The guessed word.

        Returns:
            bool: True if the guess is the target.

        Raises:
            WrongLengthError: If the guess length differs from the target length.
            InvalidWordError: If the guess is not in the valid word set.
        """

        try:
            if len(guess) != self.length:
                raise WrongLengthError(guess)
            if guess not in self.valid_words:
                raise InvalidWordError(guess)
        except GuessError as error:
            self.last_error = error.reason
            logger.debug("Rejected %r (%s)", guess, error.reason.name)
            raise

        self._guesses.append(guess)
        self.last_error = None
        logger.debug("Accepted %r as guess %d/%d", guess, len(self._guesses), self.max_tries)
        return guess == self._target

    def confirm(self) -> bool:
        """
        Submits the edit buffer and clears it, whether or not the guess is accepted.

        A rejection is kept in last_error rather than raised.

        Returns:
            bool: True if the submitted guess won the game.
        """

        guess, self.buffer = self.buffer, ""
        try:
            return self.submit_guess(guess)
        except GuessError:
            return False

    def is_won(self) -> bool:
        return bool(self._guesses) and self._guesses[-1] == self._target

    def is_lost(self) -> bool:
        return not self.is_won() and len(self._guesses) >= self.max_tries

    def tries_left(self) -> int:
        return max(0, self.max_tries - len(self._guesses))

    def feedback_for(self, index: int) -> list[Mark]:
        """
        Scores a submitted guess letter by letter against the target.

        A letter that is not a hit is marked as contained whenever the target has that letter
        anywhere, without counting how often it occurs.

        Args:
            index (int): Position of the guess in the history.

        Returns:
            list[Mark]: One mark per letter, in letter order.

        Raises:
            IndexError: If no guess has been submitted at that position.
        """

        if not 0 <= index < len(self._guesses):
            raise IndexError(f"Guess index {index} out of range (0..{len(self._guesses) - 1}).")

        marks = []
        for i, char in enumerate(self._guesses[index]):
            if char == self._target[i]:
                marks.append(Mark.HIT)
            elif char in self._target:
                marks.append(Mark.CONTAINS)
            else:
                marks.append(Mark.MISS)
        return marks

    def snapshot(self) -> BoardSnapshot:
        """
        Builds the board as it should be drawn: one row per try.

        Submitted rows carry their feedback. The row being typed shows the buffer padded
        with filler, and rows not reached yet are all filler.
        """

        empty_marks = (Mark.UNKNOWN,) * self.length
        rows = []
        for y in range(max(self.max_tries, len(self._guesses))):
            if y < len(self._guesses):
                rows.append(RowSnapshot(self._guesses[y], tuple(self.feedback_for(y))))
            elif y == len(self._guesses):
                rows.append(RowSnapshot(self.buffer.ljust(self.length, FILLER), empty_marks))
            else:
                rows.append(RowSnapshot(FILLER * self.length, empty_marks))
        return BoardSnapshot(tuple(rows), self.last_error, self.length, self.tries_left())
