"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DrillConstants

PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

SORT_MODE_VALUES = ("original", "reverse", "alphabetical", "reverse-alphabetical")


class StorageSettings(BaseSettings):
    """Where word lists and preferences live"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".random_words",
        validation_alias=AliasChoices("RANDOM_WORDS_DATA_DIR"),
    )
    bundled_dir: Path = Field(
        default=PACKAGE_DATA_DIR,
        validation_alias=AliasChoices("RANDOM_WORDS_BUNDLED_DIR"),
    )
    list_suffix: str = Field(
        default=".csv", validation_alias=AliasChoices("RANDOM_WORDS_LIST_SUFFIX")
    )
    own_vocab_name: str = Field(
        default="ownVocab", validation_alias=AliasChoices("RANDOM_WORDS_OWN_VOCAB")
    )
    preferences_file: str = Field(
        default="preferences.json",
        validation_alias=AliasChoices("RANDOM_WORDS_PREFERENCES_FILE"),
    )

    @field_validator("data_dir", "bundled_dir")
    @classmethod
    def validate_dir(cls, v: Path | str) -> Path:
        """Expand user-relative directories"""
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser()

    @field_validator("list_suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        """Normalize the list file suffix to start with a dot"""
        v = v.strip()
        if not v:
            raise ValueError("List suffix cannot be empty")
        return v if v.startswith(".") else f".{v}"

    @field_validator("own_vocab_name", "preferences_file")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()


class DrillSettings(BaseSettings):
    """Defaults for the drill preferences"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    default_interval: float = Field(
        default=3.0, validation_alias=AliasChoices("DEFAULT_SWITCH_INTERVAL")
    )
    default_words_displayed: int = Field(
        default=1, validation_alias=AliasChoices("DEFAULT_WORDS_DISPLAYED")
    )
    default_fair_distribution: bool = Field(
        default=False, validation_alias=AliasChoices("DEFAULT_FAIR_DISTRIBUTION")
    )
    default_sort_mode: str = Field(
        default="reverse", validation_alias=AliasChoices("DEFAULT_SORT_MODE")
    )

    @field_validator("default_interval")
    @classmethod
    def validate_interval(cls, v: float) -> float:
        """Seconds between resamples; 0 selects manual mode"""
        low, high = DrillConstants.MIN_INTERVAL, DrillConstants.MAX_INTERVAL
        if not low <= v <= high:
            raise ValueError(f"Interval must be between {low:g} and {high:g} seconds")
        return v

    @field_validator("default_words_displayed")
    @classmethod
    def validate_words_displayed(cls, v: int) -> int:
        low = DrillConstants.MIN_WORDS_DISPLAYED
        high = DrillConstants.MAX_WORDS_DISPLAYED
        if not low <= v <= high:
            raise ValueError(f"Words displayed must be between {low} and {high}")
        return v

    @field_validator("default_sort_mode")
    @classmethod
    def validate_sort_mode(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in SORT_MODE_VALUES:
            raise ValueError(f"Sort mode must be one of: {list(SORT_MODE_VALUES)}")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        validation_alias=AliasChoices("LOG_FORMAT"),
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    storage: StorageSettings = Field(default_factory=StorageSettings)
    drill: DrillSettings = Field(default_factory=DrillSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG"))
    verbose: bool = Field(default=False, validation_alias=AliasChoices("VERBOSE"))

    @property
    def preferences_path(self) -> Path:
        return self.storage.data_dir / self.storage.preferences_file

    def get_all_paths(self) -> list[Path]:
        """Get all writable paths"""
        paths = [self.storage.data_dir]
        if self.logging.file:
            paths.append(self.logging.file.parent)
        return paths

    def create_directories(self) -> None:
        """Create all necessary directories"""
        for path in self.get_all_paths():
            path.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = AppSettings()
