"""Wrapper configuration loaded from .env and the environment."""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    # Logging (stderr only; stdout carries the key material)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    @property
    def log_level(self) -> int:
        """Numeric logging level. Unknown names fall back to WARNING."""
        level = logging.getLevelName(self.LOG_LEVEL.strip().upper())
        return level if isinstance(level, int) else logging.WARNING


@lru_cache
def get_settings() -> Settings:
    return Settings()
