"""Editable session over a single word list"""

from collections.abc import Iterable
from pathlib import Path

from ..exceptions import WordValidationError
from ..logging_config import get_logger
from ..models.word_models import SortMode
from .interfaces import WordStoreInterface
from .projection import SortProjection
from .text_processor import TextProcessor

logger = get_logger(__name__)


class ListEditor:
    """Edits one list through a sort projection.

    The canonical order is the file order. Every mutation goes to the
    canonical sequence and the projection is rebuilt afterwards, so a
    displayed position always maps to the canonical index it was built from.
    Adds and deletes are saved immediately; edits mark the editor dirty
    and are written by ``save()`` or ``close()``.
    """

    def __init__(
        self,
        store: WordStoreInterface,
        name: str,
        sort_mode: SortMode = SortMode.REVERSE,
    ):
        self.store = store
        self.name = name
        self._canonical: list[str] = store.load(name)
        self._projection = SortProjection(self._canonical, sort_mode)
        self.dirty = False
        self.deleted = False

    @property
    def sort_mode(self) -> SortMode:
        return self._projection.mode

    @property
    def words(self) -> list[str]:
        """Words in display order"""
        return self._projection.words

    @property
    def canonical(self) -> list[str]:
        """Words in file order"""
        return list(self._canonical)

    @property
    def projection(self) -> SortProjection:
        return self._projection

    def __len__(self) -> int:
        return len(self._canonical)

    def _rebuild(self) -> None:
        self._projection = SortProjection(self._canonical, self._projection.mode)

    def set_sort_mode(self, mode: SortMode) -> None:
        self._projection = SortProjection(self._canonical, mode)

    def position_of(self, word: str) -> int | None:
        return self._projection.position_of(word)

    def add(self, word: str) -> str:
        """Append a word to the canonical order and save"""
        cleaned = TextProcessor.clean_word(word)
        if cleaned is None:
            raise WordValidationError(word, "word is empty")
        self._canonical.append(cleaned)
        self._rebuild()
        self.save()
        return cleaned

    def delete(self, positions: Iterable[int]) -> list[str]:
        """Remove words at displayed positions and save; returns the removed words"""
        indices = sorted(
            {self._projection.canonical_index(p) for p in positions}, reverse=True
        )
        if not indices:
            return []
        removed = [self._canonical[i] for i in indices]
        for index in indices:
            del self._canonical[index]
        self._rebuild()
        self.save()
        removed.reverse()
        return removed

    def edit(self, position: int, text: str) -> str:
        """Replace the word at a displayed position in the canonical order"""
        index = self._projection.canonical_index(position)
        cleaned = TextProcessor.clean_word(text)
        if cleaned is None:
            raise WordValidationError(text, "word is empty")
        if self._canonical[index] != cleaned:
            self._canonical[index] = cleaned
            self.dirty = True
            self._rebuild()
        return cleaned

    def save(self) -> None:
        self.store.save(self.name, self._canonical)
        self.dirty = False

    def close(self) -> None:
        """Write pending edits unless the list has been deleted"""
        if self.deleted or self.store.was_deleted(self.name):
            logger.debug(f"Not saving deleted list '{self.name}'")
            return
        if self.dirty:
            self.save()

    def delete_list(self) -> None:
        self.store.delete_list(self.name)
        self.deleted = True
        self.dirty = False

    def export(self, destination: Path | str) -> Path:
        if self.dirty:
            self.save()
        return self.store.export_file(self.name, destination)
