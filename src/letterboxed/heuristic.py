"""Heuristic used to order the chain search."""

from collections.abc import Collection, Iterable

from bitarray import frozenbitarray

from letterboxed.wordlist import Word


def heuristic(chain: Iterable[Word], allowed_letters: Collection[str]) -> int:
    """Count the allowed letters that no word of `chain` uses.

    Zero means the chain covers the whole box.  This counts missing letters, not
    missing words, so it can overestimate the number of words still needed.
    """
    covered: set[str] = set()
    for word in chain:
        covered |= word.letters
    return sum(1 for ch in allowed_letters if ch not in covered)


def missing_count(coverage: frozenbitarray) -> int:
    """Same as `heuristic`, for a coverage mask built with `LetterBox.letter_mask`."""
    return coverage.count(0)
