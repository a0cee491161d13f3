"""Main solver module for Letter Boxed puzzles."""

import os
import sys
from contextlib import nullcontext
from datetime import datetime
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from letterboxed.config import config as solver_config
from letterboxed.letter_box import LetterBox
from letterboxed.search import ChainSearch
from letterboxed.util import box_slug, int_comma, time_str
from letterboxed.wordlist import build, load_word_lines

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def get_logfile(groups: list[str]) -> Path | None:
    """Return the log file path for a run on the given groups, or None if logging is off."""
    if not solver_config.log_dir:
        return None
    return Path(solver_config.log_dir) / f"{box_slug(groups)}.log"


def run(
    groups: list[str],
    ignore_words: list[str],
    *,
    word_list_path: str | os.PathLike | None = None,
) -> list[list[str]]:
    """Run the solver and print the results to stdout.

    Args:
        groups: The four letter groups, one string per side.
        ignore_words: Words to leave out of every chain.
        word_list_path: Word list to use instead of the configured one.

    Returns:
        The solutions found.

    Raises:
        InvalidGroupLength: If a group is not 3 letters long.
        DictionarySourceUnavailable: If the word list cannot be read.
    """
    # Fatal input errors surface here, before any results are printed
    box = LetterBox.from_strings(groups)
    lines = load_word_lines(word_list_path)

    logfile = get_logfile(groups)
    if logfile is not None:
        print(f"Log file: {logfile}")
        logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") if logfile else nullcontext() as logf:
        try:
            solutions = solve_one(box, lines, ignore_words, logf=logf, echo=True)
        except KeyboardInterrupt:
            if logf is not None:
                print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)

    print(f"Groups: {groups}")
    print(f"Ignore: {ignore_words}")
    print(f"\n{len(solutions)} solutions found\n")
    for solution in solutions:
        print(f"Solution: {solution}")
    return solutions


def solve_one(
    box: LetterBox,
    lines: list[str],
    ignore_words: list[str],
    *,
    logf: TextIO | None = None,
    echo: bool = False,
) -> list[list[str]]:
    """Build the dictionary for `box` and search it for solutions.

    Args:
        box (LetterBox): The puzzle box.
        lines (list[str]): Raw word list lines.
        ignore_words (list[str]): Words to leave out of every chain.
        logf: File object to log the solving process, or None.
        echo (bool): Print a line to stdout for each depth without a solution.
    """
    start_time = time()
    if logf is not None:
        start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
        print(f"Start time: {start_time_str}", file=logf, flush=True)
        print(f"Box: {box}", file=logf, flush=True)
        print(f"Ignore: {ignore_words}", file=logf, flush=True)
        print("Solver config:", file=logf, flush=True)
        pprint(solver_config.model_dump(), stream=logf, width=120)
        print("", file=logf, flush=True)

    dictionary, start_index = build(box, lines)
    if logf is not None:
        print(
            f"Dictionary: {int_comma(len(dictionary))} of {int_comma(len(lines))} words usable, "
            f"{len(start_index)} start letters; "
            f"duplicate-free box: {box.no_duplicate_letters}",
            file=logf,
            flush=True,
        )

    search = ChainSearch(box, dictionary, start_index, logf=logf, echo=echo)
    solutions = search.solve(ignore_words)

    if logf is not None:
        if solutions:
            print(f"{len(solutions)} solutions found:", file=logf, flush=True)
            for solution in solutions:
                print(f"  {solution}", file=logf, flush=True)
        else:
            print(
                f"No solution found with up to {search.max_depth} words.", file=logf, flush=True
            )
        print(f"Total time: {time_str(time() - start_time)}", file=logf, flush=True)
    return solutions
