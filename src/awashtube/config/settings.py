"""
Application settings and configuration management.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from awashtube import __version__
from awashtube.models.youtube_types import validate_channel_id


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="awashtube")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # YouTube API
    youtube_api_key: str = Field(default="")
    youtube_channel_id: str = Field(default="UCGSroElDPOtCb8Wwhkae7qw")
    youtube_api_base_url: str = Field(default="https://www.googleapis.com/youtube/v3")
    page_size: int = Field(default=10, ge=1, le=50)

    # Caching
    cache_ttl_seconds: float = Field(default=300.0, gt=0)

    # Performance
    request_timeout: int = Field(default=30)

    # Storage
    data_dir: Path = Field(default=Path("./data"))
    library_file: str = Field(default="library.json")
    persist_debounce_seconds: float = Field(default=0.3, ge=0)

    # Player
    embed_base_url: str = Field(default="https://www.youtube.com/embed")
    watch_base_url: str = Field(default="https://youtube.com/watch")
    default_qualities: Annotated[list[str], NoDecode] = Field(
        default=["360p", "480p", "720p", "1080p"]
    )

    # Local API server
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000)

    @field_validator("youtube_channel_id")
    @classmethod
    def validate_youtube_channel_id(cls, v: str) -> str:
        """Validate the configured channel ID."""
        return validate_channel_id(v)

    @field_validator("default_qualities", mode="before")
    @classmethod
    def parse_default_qualities(cls, v: str | list[str]) -> list[str]:
        """Parse qualities from comma-separated string or list."""
        if isinstance(v, str):
            return [quality.strip() for quality in v.split(",") if quality.strip()]
        return v

    @field_validator("data_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Ensure directory paths are Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("youtube_api_base_url", "embed_base_url", "watch_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs so paths can be appended with a single slash."""
        return v.rstrip("/")

    @property
    def library_path(self) -> Path:
        """Location of the persisted library file."""
        return self.data_dir / self.library_file

    def create_directories(self) -> None:
        """Create required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
