"""
Settings - Runtime configuration.

Defaults come from the environment:
    JUMP61_BOARD_SIZE    Board side length (default 4)
    JUMP61_SEARCH_DEPTH  Plies searched past each candidate move (default 7)
    JUMP61_LOG_LEVEL     Logging level name (default WARNING)
    JUMP61_SEED          Seed for random players (default unset)
"""

from __future__ import annotations
from typing import Optional
import os

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Validated settings for the CLI and automated players."""
    board_size: int = Field(default=4, ge=2, le=20)
    search_depth: int = Field(default=7, ge=1)
    log_level: str = "WARNING"
    seed: Optional[int] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, **overrides) -> Settings:
        """Build settings from JUMP61_* variables, then apply non-None OVERRIDES."""
        values = {}
        env = {
            "board_size": os.getenv("JUMP61_BOARD_SIZE"),
            "search_depth": os.getenv("JUMP61_SEARCH_DEPTH"),
            "log_level": os.getenv("JUMP61_LOG_LEVEL"),
            "seed": os.getenv("JUMP61_SEED"),
        }
        for key, raw in env.items():
            if raw not in (None, ""):
                values[key] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
