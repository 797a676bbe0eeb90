"""JSON-backed preferences persistence.

Preferences are process-wide key/value state that survives restarts. A
missing or corrupt file yields defaults; a failed write is raised.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from ..core.constants import StoreConstants
from ..core.interfaces import PreferencesStoreInterface
from ..exceptions import PreferencesError
from ..logging_config import get_logger
from ..models.preferences import Preferences
from .error_handler import handle_errors

logger = get_logger(__name__)


class PreferencesStore(PreferencesStoreInterface):
    """Reads and writes ``Preferences`` as a JSON object"""

    def __init__(self, path: Path | str, defaults: Preferences | None = None):
        self.path = Path(path)
        self.defaults = defaults or Preferences()

    def _defaults(self) -> Preferences:
        return self.defaults.model_copy(deep=True)

    @handle_errors(
        default_return=None,
        log_level=logging.WARNING,
        operation_name="load preferences",
    )
    def _read(self) -> Preferences | None:
        if not self.path.exists():
            return None
        try:
            with open(self.path, encoding=StoreConstants.ENCODING) as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise PreferencesError("read", str(self.path), e) from e
        if not isinstance(data, dict):
            raise PreferencesError(
                "read", str(self.path), ValueError("expected a JSON object")
            )
        merged = {**self.defaults.model_dump(mode="json"), **data}
        try:
            return Preferences.model_validate(merged)
        except ValidationError as e:
            raise PreferencesError("validate", str(self.path), e) from e

    def load(self) -> Preferences:
        """Load preferences; defaults when the file is missing or unusable"""
        prefs = self._read()
        if prefs is None:
            return self._defaults()
        logger.debug(f"Loaded preferences from {self.path}")
        return prefs

    def save(self, preferences: Preferences) -> None:
        tmp = self.path.with_name(self.path.name + StoreConstants.TEMP_SUFFIX)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding=StoreConstants.ENCODING) as f:
                json.dump(
                    preferences.model_dump(mode="json"), f, ensure_ascii=False, indent=2
                )
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error(f"Failed to save preferences: {e}")
            tmp.unlink(missing_ok=True)
            raise PreferencesError("write", str(self.path), e) from e
