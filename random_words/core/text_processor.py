"""Text processing utilities for word list files"""

from pathlib import Path

from .constants import StoreConstants, TextConstants
from .interfaces import TextProcessorInterface


class TextProcessor(TextProcessorInterface):
    """Handles parsing, serializing and validating list content"""

    BINARY_SIGNATURES = TextConstants.BINARY_SIGNATURES
    FORBIDDEN_NAME_CHARS = StoreConstants.FORBIDDEN_NAME_CHARS

    @classmethod
    def clean_word(cls, word: str) -> str | None:
        """Trim a word; None when nothing is left"""
        if not word:
            return None
        word = word.strip()
        return word or None

    @classmethod
    def split_lines(cls, text: str) -> list[str]:
        """Parse list content: one word per line, blanks dropped"""
        if not text:
            return []
        if text.startswith(TextConstants.BOM):
            text = text[1:]
        words = []
        for line in text.splitlines():
            cleaned = cls.clean_word(line)
            if cleaned:
                words.append(cleaned)
        return words

    @classmethod
    def join_lines(cls, words: list[str]) -> str:
        """Serialize words newline-joined, without a trailing blank line"""
        return "\n".join(words)

    @classmethod
    def clean_list_name(cls, name: str) -> str | None:
        """Normalize a list name; None when empty or not usable as a file name"""
        if not name:
            return None
        name = name.strip()
        if not name or name in (".", ".."):
            return None
        if any(ch in name for ch in cls.FORBIDDEN_NAME_CHARS):
            return None
        return name

    @classmethod
    def list_name_from_path(cls, path: Path | str) -> str | None:
        """List name for an imported file: file name without extension, trimmed"""
        file_name = Path(path).name.strip()
        stem = Path(file_name).stem if Path(file_name).suffix else file_name
        return cls.clean_list_name(stem)

    @classmethod
    def is_text_file(
        cls, path: Path, sample_size: int = TextConstants.TEXT_SAMPLE_SIZE
    ) -> bool:
        """Heuristic to detect text files via magic bytes + UTF-8 decoding."""
        if not path.is_file():
            return False
        try:
            with open(path, "rb") as f:
                chunk = f.read(sample_size)
        except OSError:
            return False

        for sig in cls.BINARY_SIGNATURES:
            if chunk.startswith(sig):
                return False
        if b"\x00" in chunk:
            return False

        try:
            chunk.decode("utf-8")
            return True
        except UnicodeDecodeError as e:
            # A multi-byte character cut off by the sample boundary is fine
            return len(chunk) == sample_size and e.start >= sample_size - 3
