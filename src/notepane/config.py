"""Configuration management for notepane."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


AVAILABLE_FONTS = ("SF Pro", "New York", "Helvetica Neue", "Times New Roman", "Courier")


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Appearance
    font_name: str = Field(default="SF Pro", alias="NOTEPANE_FONT_NAME")
    font_size: float = Field(
        default=16.0,
        ge=12.0,
        le=24.0,
        alias="NOTEPANE_FONT_SIZE",
    )
    accent_color: Literal["blue", "green", "orange", "purple", "pink"] = Field(
        default="blue",
        alias="NOTEPANE_ACCENT_COLOR",
    )

    # Auto save
    enable_auto_save: bool = Field(default=True, alias="NOTEPANE_AUTO_SAVE")
    auto_save_interval: float = Field(
        default=5.0,
        ge=1.0,
        le=30.0,
        alias="NOTEPANE_AUTO_SAVE_INTERVAL",
    )

    # Defaults
    default_category: str = Field(
        default="Uncategorized",
        alias="NOTEPANE_DEFAULT_CATEGORY",
    )

    # Storage
    data_dir: Path = Field(
        default=Path.home() / ".notepane",
        alias="NOTEPANE_DATA_DIR",
    )

    @property
    def store_path(self) -> Path:
        """Location of the notes collection file."""
        return self.data_dir / "notes.json"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
