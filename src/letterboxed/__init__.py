"""Letter Boxed Puzzle Solver.

Finds short chains of dictionary words that use every letter on a four-sided box.
Consecutive letters of a word must come from different sides, and each word must
start with the last letter of the word before it.  Uses an iterative-deepening
best-first search over chains of up to six words.
"""

import sys

from .letter_box import InvalidGroupLength
from .solver import run
from .wordlist import DictionarySourceUnavailable

USAGE = """\
Usage: letterboxed <group1> <group2> <group3> <group4> <ignore_word (opt)> <ignore_word (opt)> ...
Each group must be 3 letters long
Any words after the 4 groups of 3 letters will be filtered out in the searching"""


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the Letter Boxed solver."""
    print("Starting Letter Boxed Solver...")

    args = sys.argv[1:] if argv is None else argv
    # Too few groups is not an error: print usage and return normally
    if len(args) < 4:
        print(USAGE)
        return

    groups, ignore_words = args[:4], args[4:]
    try:
        run(groups, ignore_words)
    except (InvalidGroupLength, DictionarySourceUnavailable) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
