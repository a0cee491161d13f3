"""Iterative-deepening best-first search for word chains."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from time import time
from typing import TextIO

from bitarray import frozenbitarray
from sortedcontainers import SortedList

from letterboxed.config import config as solver_config
from letterboxed.heuristic import missing_count
from letterboxed.letter_box import LetterBox
from letterboxed.util import int_comma, time_str
from letterboxed.wordlist import Dictionary, StartIndex, Word


@dataclass(slots=True)
class SearchState:
    """A partial chain on the frontier."""

    chain: tuple[Word, ...]
    """Words chosen so far, in order."""

    used: frozenset[str]
    """Texts of the words in `chain`."""

    coverage: frozenbitarray
    """Mask of the box letters used by `chain`."""

    heuristic: int
    """Number of box letters not yet used."""

    expanded: bool = False
    """Whether the successors of this state have already been pushed."""

    @property
    def cost(self) -> int:
        """Number of words in the chain."""
        return len(self.chain)

    @property
    def priority(self) -> int:
        """Frontier key; the smallest value is popped first."""
        return self.cost + self.heuristic

    @property
    def last_word(self) -> Word:
        return self.chain[-1]

    def words(self) -> list[str]:
        return [w.text for w in self.chain]


@dataclass
class SearchStats:
    """Statistics collected during a search."""

    states_pushed: int = 0
    """Number of states added to the frontier, including restored ones."""

    states_popped: int = 0
    """Number of states taken off the frontier."""

    states_expanded: int = 0
    """Number of states whose successors were generated."""

    depth: int = 0
    """Chain length ceiling currently (or last) searched."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""


def max_solutions_at_depth(
    depth: int,
    *,
    max_solutions: int | None = None,
    early_return_depth: int | None = None,
) -> int:
    """Number of solutions to collect at a depth ceiling before returning.

    Deep searches are expensive, so they stop at the first solution; shallow ones
    gather up to `max_solutions`.
    """
    if max_solutions is None:
        max_solutions = solver_config.max_solutions
    if early_return_depth is None:
        early_return_depth = solver_config.early_return_depth
    return 1 if depth > early_return_depth else max_solutions


class ChainSearch:
    """Search for the shortest word chains that use every letter of a box.

    The frontier is ordered by `cost + heuristic`.  The depth ceiling is raised one word
    at a time; states popped under one ceiling are put back on the frontier for the next,
    so nothing is recomputed.  The heuristic is not admissible, so the chains found are
    short but not guaranteed to be the shortest.
    """

    def __init__(
        self,
        box: LetterBox,
        dictionary: Dictionary,
        start_index: StartIndex,
        *,
        max_depth: int | None = None,
        max_solutions: int | None = None,
        early_return_depth: int | None = None,
        logf: TextIO | None = None,
        echo: bool = False,
    ) -> None:
        """Initialize the search.

        Args:
            box (LetterBox): The puzzle box.
            dictionary (Dictionary): Words usable with `box`, longest first.
            start_index (StartIndex): Dictionary words bucketed by first letter.
            max_depth (int | None): Longest chain to try.  Defaults to the configured value.
            max_solutions (int | None): Solutions to collect at shallow depths.
            early_return_depth (int | None): Deepest ceiling that still collects
                `max_solutions`; deeper ceilings return the first solution.
            logf: File object for progress output, or None for no output.
            echo (bool): Also print a line to stdout for each depth without a solution.
        """
        self.box = box
        self.dictionary = dictionary
        self.start_index = start_index
        self.max_depth = solver_config.max_depth if max_depth is None else max_depth
        self.max_solutions = solver_config.max_solutions if max_solutions is None else max_solutions
        self.early_return_depth = (
            solver_config.early_return_depth if early_return_depth is None else early_return_depth
        )
        self.logf = logf
        self.echo = echo

        self.stats = SearchStats()
        self._frontier: SortedList = SortedList()
        self._visited: list[SearchState] = []
        self._counter = 0

    def _log(self, message: str) -> None:
        if self.logf is not None:
            print(message, file=self.logf, flush=True)

    def _push(self, state: SearchState) -> None:
        # Negated counter: among equal priorities the newest state pops first
        self._counter += 1
        self._frontier.add((state.priority, -self._counter, state))
        self.stats.states_pushed += 1

    def _pop(self) -> SearchState:
        _, _, state = self._frontier.pop(0)
        self.stats.states_popped += 1
        if self.stats.states_popped % solver_config.report_interval == 0:
            self._log(
                f"Popped {int_comma(self.stats.states_popped)} states after "
                f"{time_str(time() - self.stats.start_time)}; depth {self.stats.depth}, "
                f"frontier {int_comma(len(self._frontier))}."
            )
        return state

    def _make_state(
        self, chain: tuple[Word, ...], used: frozenset[str], coverage: frozenbitarray
    ) -> SearchState:
        return SearchState(
            chain=chain,
            used=used,
            coverage=coverage,
            heuristic=missing_count(coverage),
        )

    def _seed(self, ignore: frozenset[str]) -> None:
        """Put a one-word chain on the frontier for every usable word."""
        for word in self.dictionary:
            if word.text in ignore:
                continue
            self._push(self._make_state((word,), frozenset((word.text,)), word.mask))

    def _expand(self, state: SearchState, ignore: frozenset[str]) -> None:
        """Push every chain that extends `state` by one word."""
        state.expanded = True
        self.stats.states_expanded += 1
        for word in self.start_index.get(state.last_word.end, ()):
            if word.text in state.used or word.text in ignore:
                continue
            self._push(
                self._make_state(
                    state.chain + (word,),
                    state.used | {word.text},
                    state.coverage | word.mask,
                )
            )

    def _restore_visited(self) -> None:
        """Move every popped state back onto the frontier."""
        visited, self._visited = self._visited, []
        for state in visited:
            self._push(state)

    def solve(self, ignore_words: Iterable[str] = ()) -> list[list[str]]:
        """Find short chains covering the box.

        Args:
            ignore_words: Words that may not appear in any chain.

        Returns:
            The solutions found at the first depth ceiling that has any, each as a list
            of words.  An empty list if no chain of up to `max_depth` words exists.
        """
        ignore = frozenset(ignore_words)
        self.stats = SearchStats()
        self._frontier = SortedList()
        self._visited = []
        self._counter = 0

        self._seed(ignore)
        self._log(f"Seeded frontier with {int_comma(len(self._frontier))} one-word chains.")

        solutions: list[list[str]] = []
        for depth in range(1, self.max_depth + 1):
            solutions = []
            self.stats.depth = depth
            limit = max_solutions_at_depth(
                depth,
                max_solutions=self.max_solutions,
                early_return_depth=self.early_return_depth,
            )

            while self._frontier:
                state = self._pop()
                self._visited.append(state)

                if state.cost > depth:
                    continue

                if state.heuristic == 0:
                    solutions.append(state.words())
                    self._log(f"Solution found: {state.words()}")
                    if len(solutions) >= limit:
                        self._log_summary()
                        return solutions

                if not state.expanded:
                    self._expand(state, ignore)

            if solutions:
                break

            message = f"No solutions found with {depth} words in the chain"
            self._log(message)
            if self.echo:
                print(message)
            self._restore_visited()

        self._log_summary()
        return solutions

    def _log_summary(self) -> None:
        self._log(
            f"Search finished at depth {self.stats.depth}: "
            f"{int_comma(self.stats.states_popped)} states popped, "
            f"{int_comma(self.stats.states_expanded)} expanded, "
            f"{int_comma(self.stats.states_pushed)} pushed in "
            f"{time_str(time() - self.stats.start_time)}."
        )
