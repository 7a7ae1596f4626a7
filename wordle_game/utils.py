import argparse
import logging
import os
import random as rnd
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from wordle_game.engine import DEFAULT_MAX_TRIES

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST = os.path.join(os.path.dirname(__file__), "words.txt")

# Argument Parser
parser = argparse.ArgumentParser(prog="wordle-game", description="Guess the hidden word in the terminal.")
parser.add_argument("-w", "--wordlist", help="Wordlist file or directory of .txt files (none defaults to the bundled list)", type=str, default=None)
parser.add_argument("-l", "--length", help="Only pick a target of this length", type=int, default=None)
parser.add_argument("-t", "--target", help="Play with this target instead of a random one", type=str, default=None)
parser.add_argument("-s", "--seed", help="Seed for picking the target", type=int, default=None)
parser.add_argument("-m", "--max-tries", help="Number of guesses allowed", type=int, default=DEFAULT_MAX_TRIES)
parser.add_argument("--plain", help="Read whole lines instead of single keystrokes", action="store_true")
parser.add_argument("-v", "--verbose", help="Log debug output to stderr", action="store_true")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    args = parser.parse_args(argv)
    if args.max_tries < 1:
        parser.error("--max-tries must be at least 1")
    if args.length is not None and args.length < 1:
        parser.error("--length must be at least 1")
    if args.target is not None and args.length is not None and len(args.target) != args.length:
        parser.error(f"--target {args.target!r} does not have length {args.length}")
    return args


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def load_words_from_file(file: str) -> list[str]:
    """
    Loads words from a specified file.

    If the file does not exist as given, it is looked up in the package directory, where the bundled lists live.
    If the file does not have an extension, '.txt' is appended to the end of the name.
    Lines are kept exactly as written; only blank lines are skipped.

    Args:
        file (str): The filename of the file from which to load words.

    Returns:
        list[str]: The words in the file, in file order.

    Raises:
        FileNotFoundError: If the file cannot be found.
    """

    # Caution where extension is not specified
    if not os.path.splitext(file)[1]:
        file += ".txt"

    if not os.path.exists(file):
        # Try to find the file next to the bundled word list
        file = os.path.join(os.path.dirname(DEFAULT_WORDLIST), file)
        if not os.path.exists(file):
            raise FileNotFoundError(f"File {file} does not exist.")

    with open(file, "r", encoding="utf-8") as f:
        wordset = f.read().splitlines()

    words = [w for w in wordset if w]
    logger.info("%d words loaded from %s", len(words), file)
    return words


def load_words_from_directory(directory: str) -> list[str]:
    """
    Loads all words from all text files in a directory.

    Args:
        directory (str): The directory to scan for files with the .txt extension.

    Returns:
        list[str]: The sorted, deduplicated words of every file.
    """

    wordset = set()
    for file in sorted(os.listdir(directory)):
        if file.endswith(".txt"):
            wordset.update(load_words_from_file(os.path.join(directory, file)))

    return sorted(wordset)


def load_words(wordlist: Optional[str] = None) -> list[str]:
    if wordlist is None:
        wordlist = DEFAULT_WORDLIST

    if os.path.isdir(wordlist):
        words = load_words_from_directory(wordlist)
    else:
        words = load_words_from_file(wordlist)

    if not words:
        raise ValueError(f"No words found in {wordlist}.")
    return words


def choose_target(words: Sequence[str], rng: rnd.Random, length: Optional[int] = None) -> str:
    """
    Picks the hidden word uniformly at random.

    Args:
        words (Sequence[str]): The pool to pick from.
        rng (random.Random): Source of randomness, seeded by the caller for reproducible games.
        length (Optional[int], optional): Only consider words of this length. Defaults to None.

    Returns:
        str: The chosen word.

    Raises:
        ValueError: If no word is left to choose from.
    """

    pool = [w for w in words if length is None or len(w) == length]
    if not pool:
        raise ValueError("No words to choose a target from." if length is None else f"No words of length {length} to choose a target from.")
    return rng.choice(pool)
