"""Ranged random sampling over the selected word lists"""

import random
from collections.abc import Mapping, Sequence

from ..logging_config import get_logger
from ..models.preferences import RangeSelection
from ..models.word_models import SampleResult, TaggedWord

logger = get_logger(__name__)


class Sampler:
    """Draws samples from ranged slices of word lists.

    ``active`` maps list names to their range selection; ``all_words`` maps
    list names to canonical words. Lists missing from ``all_words`` or with
    an empty slice are ignored.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    @staticmethod
    def _slice(selection: RangeSelection, words: Sequence[str]) -> Sequence[str]:
        start, stop = selection.bounds(len(words))
        return words[start:stop]

    def _eligible(
        self,
        active: Mapping[str, RangeSelection],
        all_words: Mapping[str, Sequence[str]],
    ) -> list[tuple[str, Sequence[str]]]:
        eligible = []
        for name, selection in active.items():
            words = all_words.get(name)
            if not words:
                continue
            chunk = self._slice(selection, words)
            if chunk:
                eligible.append((name, chunk))
        return eligible

    def compute_pool(
        self,
        active: Mapping[str, RangeSelection],
        all_words: Mapping[str, Sequence[str]],
    ) -> list[TaggedWord]:
        """Concatenate every active slice, tagged with its list name"""
        pool: list[TaggedWord] = []
        for name, chunk in self._eligible(active, all_words):
            pool.extend(TaggedWord(word, name) for word in chunk)
        return pool

    def sample_uniform(self, pool: Sequence[TaggedWord], count: int) -> SampleResult:
        """Every pooled word equally likely; no repeats within a sample"""
        if count <= 0 or not pool:
            return SampleResult()
        shuffled = list(pool)
        self.rng.shuffle(shuffled)
        return SampleResult(tuple(shuffled[: min(count, len(shuffled))]))

    def sample_fair(
        self,
        active: Mapping[str, RangeSelection],
        all_words: Mapping[str, Sequence[str]],
        count: int,
    ) -> SampleResult:
        """Every active list equally likely; draws are independent"""
        eligible = self._eligible(active, all_words)
        if not eligible:
            return SampleResult()
        drawn = []
        for _ in range(count):
            name, chunk = self.rng.choice(eligible)
            drawn.append(TaggedWord(self.rng.choice(chunk), name))
        return SampleResult(tuple(drawn))

    def sample(
        self,
        active: Mapping[str, RangeSelection],
        all_words: Mapping[str, Sequence[str]],
        count: int,
        fair: bool = False,
    ) -> SampleResult:
        if fair:
            result = self.sample_fair(active, all_words, count)
        else:
            result = self.sample_uniform(self.compute_pool(active, all_words), count)
        mode = "fair" if fair else "uniform"
        logger.debug(f"Sampled {len(result)} word(s) ({mode})")
        return result


class SampleHistory:
    """Back-then-branch history of samples, like browser history"""

    def __init__(self) -> None:
        self._entries: list[SampleResult] = []
        self._cursor = -1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[SampleResult]:
        return list(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> SampleResult | None:
        if 0 <= self._cursor < len(self._entries):
            return self._entries[self._cursor]
        return None

    @property
    def can_go_back(self) -> bool:
        return self._cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def push(self, result: SampleResult) -> None:
        """Record a sample; drops forward history when behind the tip"""
        if not result:
            return
        if self._cursor < len(self._entries) - 1:
            del self._entries[self._cursor + 1 :]
        if not self._entries or self._entries[-1] != result:
            self._entries.append(result)
        self._cursor = len(self._entries) - 1

    def back(self) -> SampleResult | None:
        if not self.can_go_back:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def forward(self) -> SampleResult | None:
        if not self.can_go_forward:
            return None
        self._cursor += 1
        return self._entries[self._cursor]

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = -1

    def drop_list(self, list_name: str) -> None:
        """Remove a deleted list's words from every recorded sample"""
        kept: list[SampleResult] = []
        cursor = -1
        for i, entry in enumerate(self._entries):
            trimmed = entry.without_list(list_name)
            if trimmed and (not kept or kept[-1] != trimmed):
                kept.append(trimmed)
            if i <= self._cursor:
                cursor = len(kept) - 1
        self._entries = kept
        self._cursor = max(cursor, 0) if kept else -1

    def rename_list(self, old: str, new: str) -> None:
        self._entries = [entry.renamed_list(old, new) for entry in self._entries]
