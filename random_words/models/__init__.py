"""Data models for the Random Words application"""

from .preferences import Preferences, RangeSelection, Theme
from .word_models import SampleResult, SortMode, TaggedWord

__all__ = [
    "Preferences",
    "RangeSelection",
    "Theme",
    "SampleResult",
    "SortMode",
    "TaggedWord",
]
