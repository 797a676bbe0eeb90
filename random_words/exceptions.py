"""Custom exceptions for the Random Words application"""

from typing import Any


class RandomWordsError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class WordValidationError(RandomWordsError):
    """Raised when a word cannot be added or edited"""

    def __init__(self, word: str, reason: str):
        super().__init__(
            f"Invalid word '{word}': {reason}", {"word": word, "reason": reason}
        )
        self.word = word
        self.reason = reason


class ListNameError(RandomWordsError):
    """Raised when a list name is empty, malformed or already taken"""

    def __init__(self, name: str, reason: str):
        super().__init__(
            f"Invalid list name '{name}': {reason}", {"name": name, "reason": reason}
        )
        self.name = name
        self.reason = reason


class ListNotFoundError(RandomWordsError):
    """Raised when a list exists neither in the data directory nor bundled"""

    def __init__(self, name: str, searched: list[str] | None = None):
        where = f" (searched: {', '.join(searched)})" if searched else ""
        super().__init__(
            f"Word list '{name}' not found{where}",
            {"name": name, "searched": searched or []},
        )
        self.name = name
        self.searched = searched or []


class ListDeletedError(RandomWordsError):
    """Raised when saving a list that was deleted earlier in the session"""

    def __init__(self, name: str):
        super().__init__(
            f"Word list '{name}' was deleted and will not be recreated",
            {"name": name},
        )
        self.name = name


class WordListIOError(RandomWordsError):
    """Raised when reading, writing or copying a list file fails"""

    def __init__(
        self,
        operation: str,
        target: str,
        original_error: Exception | None = None,
    ):
        super().__init__(
            f"Failed to {operation} '{target}'",
            {
                "operation": operation,
                "target": target,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.operation = operation
        self.target = target
        self.original_error = original_error


class PreferencesError(RandomWordsError):
    """Raised when the preferences file cannot be read or written"""

    def __init__(
        self, operation: str, path: str, original_error: Exception | None = None
    ):
        super().__init__(
            f"Preferences operation '{operation}' failed for {path}",
            {
                "operation": operation,
                "path": path,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.operation = operation
        self.path = path
        self.original_error = original_error


class ConfigurationError(RandomWordsError):
    """Raised when a setting or preference value is invalid"""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            {"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason
