"""Shared fixtures for the Letter Boxed tests."""

from letterboxed.letter_box import LetterBox
from letterboxed.wordlist import Dictionary, StartIndex, build

GROUPS = ["abc", "def", "ghi", "jkl"]

# Two words that together use all twelve letters of GROUPS: "adgjbe" ends where
# "ehkcfil" starts.
TWO_WORD_CHAIN = ["adgjbe", "ehkcfil"]


def create_box(groups: list[str] | None = None) -> LetterBox:
    return LetterBox.from_strings(GROUPS if groups is None else groups)


def create_dictionary(lines: list[str], box: LetterBox | None = None) -> tuple[Dictionary, StartIndex]:
    return build(box or create_box(), lines)
