"""Turns keystrokes into the four events the game reacts to."""

import contextlib
import logging
import os
import select
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, TextIO

logger = logging.getLogger(__name__)

ESC = "\x1b"
# Time to wait for the rest of an escape sequence after a lone ESC byte
ESCAPE_TIMEOUT = 0.05
# What a truncated multibyte character decodes to
REPLACEMENT_CHAR = "\ufffd"


class EventKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    char: str = ""


BACKSPACE = Event(EventKind.BACKSPACE)
SUBMIT = Event(EventKind.SUBMIT)
CANCEL = Event(EventKind.CANCEL)

KEYMAP = {
    "\r": SUBMIT,
    "\n": SUBMIT,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,
    ESC: CANCEL,
    "\x03": CANCEL,  # Ctrl-C
    "\x04": CANCEL,  # Ctrl-D
}


def decode_key(key: str) -> Optional[Event]:
    """
    Maps one keystroke to an event.

    Args:
        key (str): The characters produced by a single key press.

    Returns:
        Optional[Event]: The event, or None for keys the game ignores (arrows, function keys, ...).
    """

    if key in KEYMAP:
        return KEYMAP[key]
    if len(key) == 1 and key.isprintable() and key != REPLACEMENT_CHAR:
        return Event(EventKind.CHAR, key)
    return None


@contextlib.contextmanager
def cbreak_mode(fd: int) -> Iterator[None]:
    import termios
    import tty

    # cbreak keeps output processing, so the board can still be printed line by line
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def read_key(fd: int) -> str:
    """Reads one key press from a terminal in cbreak mode, including a whole escape sequence."""

    raw = os.read(fd, 1)
    if raw == ESC.encode():
        while select.select([fd], [], [], ESCAPE_TIMEOUT)[0]:
            chunk = os.read(fd, 1)
            if not chunk:
                break
            raw += chunk
    elif raw and raw[0] >= 0xC0:
        # Lead byte of a multibyte character
        while len(raw) < 4 and select.select([fd], [], [], ESCAPE_TIMEOUT)[0]:
            raw += os.read(fd, 1)
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
    return raw.decode("utf-8", errors="replace")


def key_events(stream: TextIO = sys.stdin) -> Iterator[Event]:
    """Yields events from single key presses. The terminal is restored when the generator closes."""

    fd = stream.fileno()
    with cbreak_mode(fd):
        while True:
            try:
                key = read_key(fd)
            except KeyboardInterrupt:
                key = ""
            if not key:
                yield CANCEL
                return
            event = decode_key(key)
            if event is None:
                logger.debug("Ignoring key %r", key)
                continue
            yield event


def line_events(read_line: Callable[[], str] = input, width: Optional[int] = None) -> Iterator[Event]:
    """
    Yields events from whole lines, for input that is not a terminal.

    Each line is typed in one go and then submitted. The line "exit" or the end of input cancels.
    A line longer than width is submitted empty, so it is rejected as the wrong length
    instead of being cut down to fit.

    Args:
        read_line (Callable[[], str], optional): Returns the next line. Defaults to input.
        width (Optional[int], optional): Length of the words being guessed. Defaults to None.
    """

    while True:
        try:
            line = read_line()
        except EOFError:
            yield CANCEL
            return

        line = line.rstrip("\r\n")
        if line == "exit":
            yield CANCEL
            return

        if width is None or len(line) <= width:
            for char in line:
                yield Event(EventKind.CHAR, char)
        yield SUBMIT


def _line_reader(stream: TextIO) -> Callable[[], str]:
    def read_line() -> str:
        line = stream.readline()
        if not line:
            raise EOFError
        return line

    return read_line


def events_for(stream: TextIO = sys.stdin, plain: bool = False, width: Optional[int] = None) -> Iterator[Event]:
    if plain or not stream.isatty():
        logger.debug("Reading input line by line")
        return line_events(_line_reader(stream), width)
    return key_events(stream)
