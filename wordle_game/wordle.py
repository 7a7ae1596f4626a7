import logging
import random as rnd
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

from rich.console import Console

from wordle_game.engine import BoardSnapshot, GuessEngine
from wordle_game.keys import Event, EventKind, events_for
from wordle_game.render import draw
from wordle_game.utils import choose_target, configure_logging, load_words, parse_args

logger = logging.getLogger(__name__)

EXIT_WON = 0
EXIT_LOST = 1
EXIT_ERROR = 2
EXIT_CANCELLED = 130


class GameState(Enum):
    AWAITING_INPUT = "awaiting input"
    WON = "won"
    LOST = "lost"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class GameOutcome:
    state: GameState
    guesses: tuple[str, ...]
    target: str


class GameLoop:
    """
    Drives one game: applies a single engine operation per input event and redraws after it.

    The loop stops feeding the engine once the last guess wins, the tries run out or the player cancels.
    """

    def __init__(self, engine: GuessEngine, on_change: Optional[Callable[[BoardSnapshot], None]] = None):
        self.engine = engine
        self.on_change = on_change or (lambda snapshot: None)
        self.state = GameState.AWAITING_INPUT

    def handle(self, event: Event) -> GameState:
        if self.state is not GameState.AWAITING_INPUT:
            return self.state

        if event.kind is EventKind.CANCEL:
            self.state = GameState.CANCELLED
            return self.state

        if event.kind is EventKind.CHAR:
            self.engine.append_char(event.char)
        elif event.kind is EventKind.BACKSPACE:
            self.engine.backspace()
        elif event.kind is EventKind.SUBMIT:
            if self.engine.confirm():
                self.state = GameState.WON
            elif self.engine.is_lost():
                self.state = GameState.LOST

        self.on_change(self.engine.snapshot())
        return self.state

    def run(self, events: Iterable[Event]) -> GameOutcome:
        self.on_change(self.engine.snapshot())
        for event in events:
            if self.handle(event) is not GameState.AWAITING_INPUT:
                break
        else:
            # Input ran dry before the game was decided
            self.state = GameState.CANCELLED

        logger.debug("Game ended: %s after %d guesses", self.state.value, len(self.engine.guesses))
        return GameOutcome(self.state, self.engine.guesses, self.engine.target)


def play(engine: GuessEngine, events: Iterable[Event], console: Optional[Console] = None) -> GameOutcome:
    """
    Plays a game on the terminal.

    Args:
        engine (GuessEngine): The game to play.
        events (Iterable[Event]): Input events, usually decoded from the keyboard.
        console (Optional[Console], optional): Where to draw the board. Defaults to a new Console.

    Returns:
        GameOutcome: How the game ended.
    """

    console = console or Console()
    loop = GameLoop(engine, on_change=lambda snapshot: draw(console, snapshot))
    try:
        outcome = loop.run(events)
    finally:
        close = getattr(events, "close", None)
        if close is not None:
            close()

    if outcome.state is GameState.WON:
        console.print("You won!", style="bold green")
    elif outcome.state is GameState.LOST:
        console.print(f"You lost! The word was: {outcome.target}", style="bold red")
    else:
        console.print(f"Game cancelled. The word was: {outcome.target}")
    return outcome


def new_engine(args, rng: Optional[rnd.Random] = None) -> GuessEngine:
    words = load_words(args.wordlist)
    if args.target is not None:
        target = args.target
        if target not in words:
            words.append(target)
    else:
        target = choose_target(words, rng or rnd.Random(args.seed), args.length)
    return GuessEngine(target, words, max_tries=args.max_tries)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        engine = new_engine(args)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    console = Console()
    try:
        outcome = play(engine, events_for(sys.stdin, plain=args.plain, width=engine.length), console=console)
    except KeyboardInterrupt:
        console.print(f"\nGame cancelled. The word was: {engine.target}")
        return EXIT_CANCELLED

    return {GameState.WON: EXIT_WON, GameState.LOST: EXIT_LOST}.get(outcome.state, EXIT_CANCELLED)


if __name__ == "__main__":
    sys.exit(main())
