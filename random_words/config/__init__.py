"""Configuration module for the Random Words application"""

from .settings import (
    AppSettings,
    DrillSettings,
    LoggingSettings,
    StorageSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "StorageSettings",
    "DrillSettings",
    "LoggingSettings",
    "settings",
]
