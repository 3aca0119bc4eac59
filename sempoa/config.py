"""
Configuration settings for the sempoa trainer.

Uses Pydantic Settings for environment variable management with .env file support.
All variables use the SEMPOA_ prefix, e.g. SEMPOA_BOARD_COLUMNS=13.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEMPOA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Board
    # ========================================
    board_columns: int = Field(
        default=9,
        ge=1,
        description="Number of columns (rods) on the bead board",
    )
    upper_beads_per_column: int = Field(
        default=1,
        ge=1,
        description="Beads above the crossbar, each worth 5x the place value",
    )
    lower_beads_per_column: int = Field(
        default=4,
        ge=1,
        description="Beads below the crossbar, each worth 1x the place value",
    )

    # ========================================
    # Curriculum
    # ========================================
    mastery_threshold: int = Field(
        default=10,
        ge=1,
        description="Correct answers required to complete a level",
    )
    generator_retry_budget: int = Field(
        default=50,
        ge=1,
        description="Redraw attempts before the question generator accepts a best-effort pair",
    )

    # ========================================
    # Persistence
    # ========================================
    progress_key: str = Field(
        default="sempoa_user_progress",
        description="Key used to load/save learner progress",
    )
    storage_backend: Literal["sqlite", "json", "memory"] = Field(
        default="sqlite",
        description="Where learner progress is persisted",
    )
    data_dir: Path = Field(
        default=Path.home() / ".sempoa",
        description="Directory holding the progress database or JSON file",
    )
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy URL override (defaults to SQLite inside data_dir)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level for the CLI",
    )

    # ========================================
    # Helper Methods
    # ========================================
    def get_database_url(self) -> str:
        """Return the configured database URL, defaulting to SQLite in data_dir."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'sempoa.db'}"

    def get_json_path(self) -> Path:
        """Path of the JSON progress file used by the json backend."""
        return self.data_dir / "progress.json"

    def get_board_config(self) -> dict[str, int]:
        """Board dimensions as keyword arguments for BoardConfig."""
        return {
            "columns": self.board_columns,
            "upper_beads": self.upper_beads_per_column,
            "lower_beads": self.lower_beads_per_column,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
