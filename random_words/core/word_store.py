"""File-backed word list store.

Each list is a newline-delimited UTF-8 file ``<data_dir>/<name><suffix>``.
Lists shipped with the package act as read-only defaults until the user
saves a copy. Deleting a bundled list leaves a tombstone so it stays hidden.
"""

import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..exceptions import (
    ListDeletedError,
    ListNameError,
    ListNotFoundError,
    WordListIOError,
)
from ..logging_config import get_logger
from .constants import StoreConstants
from .interfaces import ListDeletedCallback, TextProcessorInterface, WordStoreInterface
from .text_processor import TextProcessor

logger = get_logger(__name__)


class WordStore(WordStoreInterface):
    """Owns the persisted word lists"""

    def __init__(
        self,
        data_dir: Path | str,
        bundled_dir: Path | str | None = None,
        text_processor: TextProcessorInterface | None = None,
        suffix: str = ".csv",
        own_vocab_name: str = "ownVocab",
    ):
        self.data_dir = Path(data_dir)
        self.bundled_dir = Path(bundled_dir) if bundled_dir else None
        self.text_processor = text_processor or TextProcessor()
        self.suffix = suffix
        self.own_vocab_name = own_vocab_name
        self._deleted_in_session: set[str] = set()
        self._subscribers: list[ListDeletedCallback] = []

    # ---- paths ----

    def _user_path(self, name: str) -> Path:
        return self.data_dir / f"{name}{self.suffix}"

    def _bundled_path(self, name: str) -> Path | None:
        if not self.bundled_dir:
            return None
        path = self.bundled_dir / f"{name}{self.suffix}"
        return path if path.is_file() else None

    def _tombstone_path(self) -> Path:
        return self.data_dir / StoreConstants.DELETED_LISTS_FILE

    def _names_in(self, directory: Path | None) -> list[str]:
        if not directory or not directory.is_dir():
            return []
        return sorted(
            p.stem
            for p in directory.iterdir()
            if p.is_file() and p.suffix == self.suffix and not p.name.startswith(".")
        )

    # ---- tombstones ----

    def _tombstones(self) -> set[str]:
        path = self._tombstone_path()
        if not path.exists():
            return set()
        try:
            with open(path, encoding=StoreConstants.ENCODING) as f:
                return set(self.text_processor.split_lines(f.read()))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read deleted-list markers: {e}")
            return set()

    def _set_tombstone(self, name: str, hidden: bool) -> None:
        names = self._tombstones()
        if hidden == (name in names):
            return
        if hidden:
            names.add(name)
        else:
            names.discard(name)
        self._write_text(
            self._tombstone_path(),
            self.text_processor.join_lines(sorted(names)),
            "deleted-list markers",
        )

    def _revive(self, name: str) -> None:
        """Allow a deleted name to be written again"""
        self._deleted_in_session.discard(name)
        self._set_tombstone(name, False)

    # ---- io ----

    def _write_text(self, path: Path, text: str, target: str) -> None:
        """Write through a temp file and os.replace"""
        tmp = path.with_name(path.name + StoreConstants.TEMP_SUFFIX)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding=StoreConstants.ENCODING, newline="\n") as f:
                f.write(text)
            os.replace(tmp, path)
        except OSError as e:
            logger.error(f"Failed to write {target} to {path}: {e}")
            tmp.unlink(missing_ok=True)
            raise WordListIOError("write", target, e) from e

    def _require_name(self, name: str) -> str:
        cleaned = self.text_processor.clean_list_name(name)
        if cleaned is None:
            raise ListNameError(name, "name is empty or contains path separators")
        return cleaned

    # ---- queries ----

    def bundled_names(self) -> list[str]:
        return self._names_in(self.bundled_dir)

    def list_names(self) -> list[str]:
        """Own vocabulary first, then bundled lists, then the user's own lists"""
        hidden = self._tombstones()
        names = [self.own_vocab_name]
        for name in self.bundled_names():
            if name not in hidden and name not in names:
                names.append(name)
        for name in self._names_in(self.data_dir):
            if name not in names:
                names.append(name)
        return names

    def exists(self, name: str) -> bool:
        if name == self.own_vocab_name or self._user_path(name).is_file():
            return True
        return self._bundled_path(name) is not None and name not in self._tombstones()

    def was_deleted(self, name: str) -> bool:
        return name in self._deleted_in_session

    def load(self, name: str) -> list[str]:
        """Load a list's canonical words, preferring the user's copy"""
        name = self._require_name(name)
        path = self._user_path(name)
        if not path.is_file():
            bundled = self._bundled_path(name)
            if bundled is None or name in self._tombstones():
                if name == self.own_vocab_name:
                    return []
                searched = [str(path)]
                if self.bundled_dir:
                    searched.append(str(self.bundled_dir / path.name))
                raise ListNotFoundError(name, searched)
            path = bundled

        try:
            with open(path, encoding=StoreConstants.ENCODING) as f:
                words = self.text_processor.split_lines(f.read())
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read list '{name}' from {path}: {e}")
            raise WordListIOError("read", name, e) from e

        logger.debug(f"Loaded {len(words)} words from {path}")
        return words

    # ---- mutations ----

    def save(self, name: str, words: list[str]) -> None:
        """Overwrite the user's copy of a list"""
        name = self._require_name(name)
        if name in self._deleted_in_session:
            raise ListDeletedError(name)
        self._write_text(
            self._user_path(name), self.text_processor.join_lines(list(words)), name
        )
        logger.debug(f"Saved {len(words)} words to list '{name}'")

    def create(self, name: str) -> str:
        """Create an empty list; the name must be new"""
        name = self._require_name(name)
        if self.exists(name):
            raise ListNameError(name, "a list with this name already exists")
        self._revive(name)
        self.save(name, [])
        logger.info(f"Created list '{name}'")
        return name

    def rename(self, old: str, new: str) -> str:
        """Move a list's words to a new, unused name"""
        old = self._require_name(old)
        words = self.load(old)
        new = self._require_name(new)
        if new == old:
            return new
        if self.exists(new):
            raise ListNameError(new, "a list with this name already exists")
        self._revive(new)
        self.save(new, words)
        self._remove(old)
        logger.info(f"Renamed list '{old}' to '{new}'")
        return new

    def import_file(self, path: Path | str) -> str:
        """Copy an external file verbatim under its extension-stripped name"""
        source = Path(path)
        if not source.is_file():
            raise WordListIOError(
                "import", str(source), FileNotFoundError(f"No such file: {source}")
            )
        suffix = source.suffix.lower()
        if suffix and suffix not in StoreConstants.IMPORT_EXTENSIONS:
            raise WordListIOError(
                "import",
                str(source),
                ValueError(f"Unsupported file type '{source.suffix}'"),
            )
        name = self.text_processor.list_name_from_path(source)
        if name is None:
            raise ListNameError(source.name, "cannot derive a list name from the file")
        if not self.text_processor.is_text_file(source):
            raise WordListIOError(
                "import", str(source), ValueError("not a UTF-8 text file")
            )

        self._revive(name)
        destination = self._user_path(name)
        tmp = destination.with_name(destination.name + StoreConstants.TEMP_SUFFIX)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with open(source, "rb") as src, open(tmp, "wb") as dst:
                shutil.copyfileobj(src, dst)
            os.replace(tmp, destination)
        except OSError as e:
            logger.error(f"Failed to import {source}: {e}")
            tmp.unlink(missing_ok=True)
            raise WordListIOError("import", str(source), e) from e

        logger.info(f"Imported {source} as list '{name}'")
        return name

    def export_file(self, name: str, destination: Path | str) -> Path:
        """Write a list to a file, or into a directory as <name><suffix>"""
        words = self.load(name)
        target = Path(destination)
        if target.is_dir():
            target = target / f"{name}{self.suffix}"
        self._write_text(target, self.text_processor.join_lines(words), str(target))
        logger.info(f"Exported list '{name}' to {target}")
        return target

    def _remove(self, name: str) -> None:
        user_path = self._user_path(name)
        try:
            user_path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Failed to delete {user_path}: {e}")
            raise WordListIOError("delete", name, e) from e
        if self._bundled_path(name) is not None:
            self._set_tombstone(name, True)
        self._deleted_in_session.add(name)

    def delete_list(self, name: str) -> None:
        """Delete a list; it will not be recreated by later saves"""
        name = self._require_name(name)
        if not self.exists(name):
            raise ListNotFoundError(name)
        self._remove(name)
        logger.info(f"Deleted list '{name}'")
        for callback in list(self._subscribers):
            callback(name)

    def subscribe(self, callback: ListDeletedCallback) -> None:
        self._subscribers.append(callback)

    def add_to_own_vocab(self, words: Iterable[str]) -> list[str]:
        """Append words not yet in the own-vocabulary list; returns the new ones"""
        name = self.own_vocab_name
        self._revive(name)
        existing = self.load(name)
        added: list[str] = []
        for word in words:
            cleaned = self.text_processor.clean_word(word)
            if cleaned and cleaned not in existing and cleaned not in added:
                added.append(cleaned)
        if added:
            self.save(name, existing + added)
            logger.info(f"Added {len(added)} word(s) to '{name}'")
        return added

    def find_list_containing(self, word: str, names: Iterable[str]) -> str | None:
        for name in names:
            if self.exists(name) and word in self.load(name):
                return name
        return None
