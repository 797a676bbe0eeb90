"""Interface definitions for core components"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from pathlib import Path

from ..models.preferences import Preferences

ListDeletedCallback = Callable[[str], None]


class TextProcessorInterface(ABC):
    """Interface for list content parsing and validation"""

    @abstractmethod
    def clean_word(self, word: str) -> str | None:
        """Trim a word; None when nothing is left"""
        pass

    @abstractmethod
    def split_lines(self, text: str) -> list[str]:
        """Parse list content into words"""
        pass

    @abstractmethod
    def join_lines(self, words: list[str]) -> str:
        """Serialize words into list content"""
        pass

    @abstractmethod
    def clean_list_name(self, name: str) -> str | None:
        """Normalize a list name"""
        pass

    @abstractmethod
    def list_name_from_path(self, path: Path | str) -> str | None:
        """Derive a list name from an imported file path"""
        pass

    @abstractmethod
    def is_text_file(self, path: Path, sample_size: int = 4096) -> bool:
        """Check whether a file looks like UTF-8 text"""
        pass


class WordStoreInterface(ABC):
    """Interface for persisted word lists"""

    own_vocab_name: str

    @abstractmethod
    def list_names(self) -> list[str]:
        """Names of every available list"""
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check whether a list is available"""
        pass

    @abstractmethod
    def load(self, name: str) -> list[str]:
        """Load a list's canonical words"""
        pass

    @abstractmethod
    def save(self, name: str, words: list[str]) -> None:
        """Persist a list's canonical words"""
        pass

    @abstractmethod
    def create(self, name: str) -> str:
        """Create an empty list"""
        pass

    @abstractmethod
    def rename(self, old: str, new: str) -> str:
        """Rename a list"""
        pass

    @abstractmethod
    def import_file(self, path: Path | str) -> str:
        """Copy an external file into the store"""
        pass

    @abstractmethod
    def export_file(self, name: str, destination: Path | str) -> Path:
        """Write a list to an external location"""
        pass

    @abstractmethod
    def delete_list(self, name: str) -> None:
        """Delete a list and notify subscribers"""
        pass

    @abstractmethod
    def was_deleted(self, name: str) -> bool:
        """Check whether a list was deleted in this session"""
        pass

    @abstractmethod
    def subscribe(self, callback: ListDeletedCallback) -> None:
        """Register a list-deleted observer"""
        pass

    @abstractmethod
    def add_to_own_vocab(self, words: Iterable[str]) -> list[str]:
        """Append new words to the own-vocabulary list"""
        pass

    @abstractmethod
    def find_list_containing(self, word: str, names: Iterable[str]) -> str | None:
        """First list among names that contains the word"""
        pass


class PreferencesStoreInterface(ABC):
    """Interface for persisted preferences"""

    @abstractmethod
    def load(self) -> Preferences:
        """Load preferences, falling back to defaults"""
        pass

    @abstractmethod
    def save(self, preferences: Preferences) -> None:
        """Persist preferences"""
        pass
