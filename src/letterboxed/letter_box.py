"""Classes and functions for representing the letter box."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from bitarray import frozenbitarray
from bitarray.util import zeros

GROUP_SIZE = 3
"""Number of letters on each side of the box."""

N_GROUPS = 4
"""Number of sides of the box."""


class InvalidGroupLength(ValueError):
    """Raised when a letter group does not have exactly `GROUP_SIZE` characters."""


@dataclass(frozen=True)
class LetterGroup:
    """One side of the box.

    Duplicate letters within a group are allowed.
    """

    letters: str
    """The letters on this side, in the order given."""

    def __post_init__(self) -> None:
        """Validate the group length."""
        if len(self.letters) != GROUP_SIZE:
            raise InvalidGroupLength(
                f"Each group of letters must be {GROUP_SIZE} letters long, "
                f"got {self.letters!r}"
            )

    def __contains__(self, letter: object) -> bool:
        return letter in self.letters

    def __str__(self) -> str:
        return self.letters


@dataclass
class LetterBox:
    """The four sides of a Letter Boxed puzzle, plus derived lookup tables.

    A box is built once and must not be modified afterwards.
    """

    groups: tuple[LetterGroup, ...]
    """The sides of the box."""

    allowed_letters: frozenset[str] = field(init=False)
    """Every letter that appears on the box."""

    alphabet: tuple[str, ...] = field(init=False)
    """The allowed letters in sorted order; letter `alphabet[i]` is bit `i` of a letter mask."""

    _letter_groups: dict[str, frozenset[int]] = field(init=False, repr=False)
    _bit_index: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the box and build the derived tables."""
        self.groups = tuple(self.groups)
        if len(self.groups) != N_GROUPS:
            raise ValueError(f"A letter box has {N_GROUPS} groups, got {len(self.groups)}.")

        letter_groups: dict[str, set[int]] = {}
        for idx, group in enumerate(self.groups):
            for ch in group.letters:
                letter_groups.setdefault(ch, set()).add(idx)

        self._letter_groups = {ch: frozenset(idxs) for ch, idxs in letter_groups.items()}
        self.allowed_letters = frozenset(letter_groups)
        self.alphabet = tuple(sorted(self.allowed_letters))
        self._bit_index = {ch: i for i, ch in enumerate(self.alphabet)}

    @classmethod
    def from_strings(cls, groups: Sequence[str]) -> "LetterBox":
        """Create a box from raw group strings, e.g. `["abc", "def", "ghi", "jkl"]`.

        Raises:
            InvalidGroupLength: If any group is not exactly 3 characters long.
        """
        return cls(groups=tuple(LetterGroup(g) for g in groups))

    @property
    def no_duplicate_letters(self) -> bool:
        """True when all twelve letter slots hold distinct letters."""
        return len(self.allowed_letters) == GROUP_SIZE * N_GROUPS

    def same_group(self, a: str, b: str) -> bool:
        """Whether some side of the box holds both letters."""
        return not self._letter_groups.get(a, frozenset()).isdisjoint(
            self._letter_groups.get(b, frozenset())
        )

    def letter_mask(self, letters: Iterable[str]) -> frozenbitarray:
        """Return a bit mask over `alphabet` with the bits for `letters` set.

        Letters that are not on the box are ignored.
        """
        mask = zeros(len(self.alphabet))
        for ch in letters:
            idx = self._bit_index.get(ch)
            if idx is not None:
                mask[idx] = 1
        return frozenbitarray(mask)

    def __str__(self) -> str:
        return " ".join(str(g) for g in self.groups)


def is_legal(word: str, box: LetterBox) -> bool:
    """Return whether consecutive letters of `word` always come from different sides.

    Letters that are not on the box do not belong to any side, so they never make a
    pair illegal here; membership is checked separately by the dictionary builder.
    """
    return all(not box.same_group(a, b) for a, b in zip(word, word[1:]))
