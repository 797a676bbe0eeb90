"""Sort projections over a canonical word sequence.

A projection is a read-only reordering that remembers, for every displayed
position, which canonical index it came from. Edits made through a
projection are applied to the canonical index, never matched by value.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from ..models.word_models import SortMode


@dataclass(frozen=True)
class ProjectionEntry:
    """A displayed word and its canonical index"""

    canonical_index: int
    word: str


class SortProjection:
    """Read-only view of a canonical sequence in one sort mode"""

    def __init__(self, canonical: Sequence[str], mode: SortMode = SortMode.ORIGINAL):
        self.mode = mode
        self._entries = self._build(canonical, mode)

    @staticmethod
    def _build(canonical: Sequence[str], mode: SortMode) -> list[ProjectionEntry]:
        entries = [ProjectionEntry(i, w) for i, w in enumerate(canonical)]
        if mode is SortMode.REVERSE:
            entries.reverse()
        elif mode is SortMode.ALPHABETICAL:
            entries.sort(key=lambda e: e.word.casefold())
        elif mode is SortMode.REVERSE_ALPHABETICAL:
            # sorted(reverse=True) keeps equal keys in canonical order
            entries.sort(key=lambda e: e.word.casefold(), reverse=True)
        return entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return (e.word for e in self._entries)

    def __getitem__(self, position: int) -> str:
        return self._entries[position].word

    @property
    def words(self) -> list[str]:
        return [e.word for e in self._entries]

    @property
    def entries(self) -> list[ProjectionEntry]:
        return list(self._entries)

    def canonical_index(self, position: int) -> int:
        """Canonical index behind a displayed position"""
        if position < 0 or position >= len(self._entries):
            raise IndexError(
                f"Position {position} out of range for {len(self._entries)} words"
            )
        return self._entries[position].canonical_index

    def position_of_index(self, canonical_index: int) -> int | None:
        for position, entry in enumerate(self._entries):
            if entry.canonical_index == canonical_index:
                return position
        return None

    def position_of(self, word: str) -> int | None:
        """Displayed position of the first occurrence of a word"""
        for position, entry in enumerate(self._entries):
            if entry.word == word:
                return position
        return None
