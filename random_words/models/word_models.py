"""Word, sample and sort-mode models"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class SortMode(str, Enum):
    """Display orders for a word list"""

    ORIGINAL = "original"
    REVERSE = "reverse"
    ALPHABETICAL = "alphabetical"
    REVERSE_ALPHABETICAL = "reverse-alphabetical"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]

    @classmethod
    def parse(cls, value: "str | SortMode") -> "SortMode":
        """Accept either the enum value or its display label"""
        if isinstance(value, SortMode):
            return value
        text = value.strip().lower()
        for mode in cls:
            if text in (mode.value, mode.label.lower()):
                return mode
        raise ValueError(f"Unknown sort mode: {value}")


_SORT_LABELS = {
    SortMode.ORIGINAL: "CSV Order",
    SortMode.REVERSE: "Reverse CSV Order",
    SortMode.ALPHABETICAL: "Alphabetical",
    SortMode.REVERSE_ALPHABETICAL: "Reverse Alphabetical",
}


@dataclass(frozen=True)
class TaggedWord:
    """A word together with the list it was drawn from"""

    word: str
    list_name: str

    def __str__(self) -> str:
        return self.word


@dataclass(frozen=True)
class SampleResult:
    """One sampling event: the words shown together"""

    entries: tuple[TaggedWord, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TaggedWord]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    @property
    def words(self) -> list[str]:
        return [entry.word for entry in self.entries]

    @property
    def list_names(self) -> set[str]:
        return {entry.list_name for entry in self.entries}

    def without_list(self, list_name: str) -> "SampleResult":
        """Copy with every entry from the given list removed"""
        return SampleResult(
            tuple(e for e in self.entries if e.list_name != list_name)
        )

    def renamed_list(self, old: str, new: str) -> "SampleResult":
        return SampleResult(
            tuple(
                TaggedWord(e.word, new) if e.list_name == old else e
                for e in self.entries
            )
        )
