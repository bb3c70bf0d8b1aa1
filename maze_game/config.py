"""Game configuration using Pydantic settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Game settings loaded from MAZE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Maze
    width: int = 15
    height: int = 15
    seed: Optional[int] = None
    layout_file: Optional[Path] = None

    # Output
    log_level: str = "WARNING"
    debug: bool = False  # echo each successful move

    @field_validator("width", "height")
    @classmethod
    def validate_dimension(cls, v: int) -> int:
        """Reject non-positive maze dimensions."""
        if v < 1:
            raise ValueError("maze dimensions must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
