"""Module for word list loading and dictionary construction."""

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import TypeAlias

from bitarray import frozenbitarray

from letterboxed.config import config as solver_config
from letterboxed.letter_box import LetterBox, is_legal


class DictionarySourceUnavailable(FileNotFoundError):
    """Raised when the word list file cannot be opened."""


@dataclass(frozen=True)
class Word:
    """A word accepted into the dictionary for a particular box."""

    text: str
    """The word itself."""

    start: str
    """First letter."""

    end: str
    """Last letter."""

    letters: frozenset[str]
    """Distinct letters of the word."""

    mask: frozenbitarray
    """`letters` as a bit mask over the box alphabet (see `LetterBox.letter_mask`)."""

    @classmethod
    def from_text(cls, text: str, box: LetterBox) -> "Word":
        """Create a Word from its text; the text must be non-empty."""
        letters = frozenset(text)
        return cls(
            text=text,
            start=text[0],
            end=text[-1],
            letters=letters,
            mask=box.letter_mask(letters),
        )

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


Dictionary: TypeAlias = tuple[Word, ...]
StartIndex: TypeAlias = dict[str, tuple[Word, ...]]


def load_word_lines(path: str | PathLike | None = None) -> list[str]:
    """Load the raw lines of the word list file.

    Only the line terminator is removed; no other trimming or case folding is applied.

    Args:
        path: Path to the word list.  Defaults to the configured `word_list_path`.

    Raises:
        DictionarySourceUnavailable: If the file cannot be opened.
    """
    word_list_path = Path(path if path is not None else solver_config.word_list_path)
    try:
        with word_list_path.open("r", encoding="utf-8", errors="replace", newline="\n") as f:
            return [line.removesuffix("\n").removesuffix("\r") for line in f]
    except OSError as e:
        raise DictionarySourceUnavailable(f"Word list file not found: {word_list_path}") from e


def accept_word(candidate: str, box: LetterBox) -> bool:
    """Return whether a raw candidate can be used with the given box.

    The checks run in order: length bounds, repeated letters (only when the box has
    twelve distinct letters), membership in the box, then side adjacency.
    """
    if not solver_config.min_word_length <= len(candidate) <= solver_config.max_word_length:
        return False
    letters = set(candidate)
    if box.no_duplicate_letters and len(letters) != len(candidate):
        return False
    if not letters <= box.allowed_letters:
        return False
    return is_legal(candidate, box)


def build_dictionary(box: LetterBox, lines: Iterable[str]) -> Dictionary:
    """Filter raw word lines down to the words usable with `box`.

    Returns:
        The accepted words, longest first.  Words of equal length keep their order
        in `lines`.
    """
    accepted = [Word.from_text(line, box) for line in lines if accept_word(line, box)]
    # sorted() is stable, so ties keep source order
    return tuple(sorted(accepted, key=len, reverse=True))


def create_start_index(dictionary: Dictionary) -> StartIndex:
    """Create a mapping from a letter to the dictionary words starting with it.

    Words within each bucket keep their dictionary order.
    """
    buckets: dict[str, list[Word]] = {}
    for word in dictionary:
        buckets.setdefault(word.start, []).append(word)
    return {ch: tuple(words) for ch, words in buckets.items()}


def build(box: LetterBox, lines: Iterable[str]) -> tuple[Dictionary, StartIndex]:
    """Build both the dictionary and its start-letter index for `box`."""
    dictionary = build_dictionary(box, lines)
    return dictionary, create_start_index(dictionary)
