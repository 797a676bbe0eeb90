"""Pydantic models for persisted drill preferences"""

import math
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.constants import DrillConstants


class Theme(str, Enum):
    """Appearance preference; stored only"""

    SYSTEM = "System"
    LIGHT = "Light"
    DARK = "Dark"


class RangeSelection(BaseModel):
    """Fractional sub-slice of a list eligible for sampling"""

    model_config = {"frozen": True}

    lower: float = Field(default=0.0, description="Lower bound fraction")
    upper: float = Field(default=1.0, description="Upper bound fraction")

    @field_validator("lower", "upper")
    @classmethod
    def clamp_fraction(cls, v: float) -> float:
        """Clamp into [0, 1]"""
        if math.isnan(v):
            raise ValueError("Range bound cannot be NaN")
        return min(max(v, 0.0), 1.0)

    @model_validator(mode="after")
    def check_order(self) -> "RangeSelection":
        if self.lower > self.upper:
            raise ValueError(
                f"Lower bound {self.lower} is greater than upper bound {self.upper}"
            )
        return self

    def with_lower(self, value: float) -> "RangeSelection":
        """Move the lower bound, never past the upper bound"""
        value = min(max(value, 0.0), 1.0)
        return RangeSelection(lower=min(value, self.upper), upper=self.upper)

    def with_upper(self, value: float) -> "RangeSelection":
        """Move the upper bound, never below the lower bound"""
        value = min(max(value, 0.0), 1.0)
        return RangeSelection(lower=self.lower, upper=max(value, self.lower))

    def bounds(self, total: int) -> tuple[int, int]:
        """Index slice [start, stop) for a list of the given length"""
        return math.floor(total * self.lower), math.floor(total * self.upper)

    def is_empty_for(self, total: int) -> bool:
        start, stop = self.bounds(total)
        return start >= stop

    def __str__(self) -> str:
        return f"{int(self.lower * 100)}% - {int(self.upper * 100)}%"


class Preferences(BaseModel):
    """User preferences that survive restarts"""

    switch_interval: float = Field(
        default=3.0,
        ge=DrillConstants.MIN_INTERVAL,
        le=DrillConstants.MAX_INTERVAL,
        description="Seconds between resamples; 0 means manual mode",
    )
    words_displayed: int = Field(
        default=1,
        ge=DrillConstants.MIN_WORDS_DISPLAYED,
        le=DrillConstants.MAX_WORDS_DISPLAYED,
        description="Number of words shown per sample",
    )
    fair_distribution: bool = Field(
        default=False, description="Weight each selected list equally"
    )
    theme: Theme = Field(default=Theme.SYSTEM, description="Appearance")
    selected_lists: list[str] = Field(default=[], description="Selected list names")
    list_ranges: dict[str, RangeSelection] = Field(
        default={}, description="Range selection per list"
    )

    @field_validator("selected_lists")
    @classmethod
    def validate_selected_lists(cls, v: list[str]) -> list[str]:
        """Drop blanks and duplicates, keep order"""
        cleaned: list[str] = []
        for name in v:
            if isinstance(name, str) and name.strip() and name not in cleaned:
                cleaned.append(name)
        return cleaned

    @model_validator(mode="after")
    def ensure_ranges(self) -> "Preferences":
        """Every selected list has a range and no range is orphaned"""
        ranges = {
            name: rng
            for name, rng in self.list_ranges.items()
            if name in self.selected_lists
        }
        for name in self.selected_lists:
            ranges.setdefault(name, RangeSelection())
        self.list_ranges = ranges
        return self

    @property
    def is_manual(self) -> bool:
        return self.switch_interval == 0
