import random

import pytest

from wordle_game.engine import DEFAULT_MAX_TRIES
from wordle_game.utils import (
    DEFAULT_WORDLIST,
    choose_target,
    load_words,
    load_words_from_directory,
    load_words_from_file,
    parse_args,
)


@pytest.fixture
def wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("hello\njolly\n\nHELLO\nhi\n", encoding="utf-8")
    return path


def test_load_words_keeps_lines_verbatim(wordlist):
    assert load_words_from_file(str(wordlist)) == ["hello", "jolly", "HELLO", "hi"]


def test_load_words_appends_txt_extension(wordlist):
    assert load_words_from_file(str(wordlist.with_suffix(""))) == ["hello", "jolly", "HELLO", "hi"]


def test_load_words_relative_to_cwd(wordlist, monkeypatch):
    monkeypatch.chdir(wordlist.parent)
    assert "jolly" in load_words_from_file("words")


def test_load_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words_from_file(str(tmp_path / "missing.txt"))


def test_load_words_from_directory(tmp_path):
    (tmp_path / "a.txt").write_text("jolly\nhello\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("hello\nworld\n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignored\n", encoding="utf-8")
    assert load_words_from_directory(str(tmp_path)) == ["hello", "jolly", "world"]
    assert load_words(str(tmp_path)) == ["hello", "jolly", "world"]


def test_load_words_empty_list(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_words(str(path))


def test_bundled_wordlist():
    words = load_words()
    assert words == load_words_from_file(DEFAULT_WORDLIST)
    assert "hello" in words and "jolly" in words
    assert all(len(word) == 5 for word in words)


def test_choose_target_is_reproducible():
    words = ["hello", "jolly", "world", "yells"]
    first = choose_target(words, random.Random(42))
    assert first in words
    assert all(choose_target(words, random.Random(42)) == first for _ in range(5))


def test_choose_target_by_length():
    words = ["hi", "hello", "jolly", "ok"]
    for seed in range(20):
        assert len(choose_target(words, random.Random(seed), length=2)) == 2


@pytest.mark.parametrize("words,length", [([], None), (["hello"], 3)])
def test_choose_target_empty_pool(words, length):
    with pytest.raises(ValueError):
        choose_target(words, random.Random(0), length)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.wordlist is None
    assert args.target is None
    assert args.seed is None
    assert args.max_tries == DEFAULT_MAX_TRIES
    assert not args.plain and not args.verbose


def test_parse_args_options():
    args = parse_args(["-w", "list.txt", "-l", "4", "-t", "word", "-s", "7", "-m", "3", "--plain", "-v"])
    assert (args.wordlist, args.length, args.target, args.seed, args.max_tries) == ("list.txt", 4, "word", 7, 3)
    assert args.plain and args.verbose


@pytest.mark.parametrize("argv", [["-m", "0"], ["-l", "0"]])
def test_parse_args_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_load_words_falls_back_to_bundled_lists(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_words_from_file("words") == load_words_from_file(DEFAULT_WORDLIST)


def test_parse_args_rejects_target_of_other_length():
    with pytest.raises(SystemExit):
        parse_args(["-t", "hello", "-l", "4"])
    assert parse_args(["-t", "hello", "-l", "5"]).length == 5
