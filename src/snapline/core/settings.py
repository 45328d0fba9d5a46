"""Centralized configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local, .env.dev/.env.test/.env.prod

The memento core only needs two knobs: how long the default random state is,
and how many characters of it go into a snapshot label.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `SNAPLINE_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    state_length : int
        Length of the string produced by the default random transition;
        maps from `SNAPLINE_STATE_LENGTH`.
    label_width : int
        Number of leading characters of a state kept in a snapshot label;
        maps from `SNAPLINE_LABEL_WIDTH`.
    """

    environment: EnvName = Field(default="dev", alias="SNAPLINE_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    state_length: int = Field(default=30, ge=1, alias="SNAPLINE_STATE_LENGTH")
    label_width: int = Field(default=9, ge=1, alias="SNAPLINE_LABEL_WIDTH")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Return the cached `Settings`.

    `Subject` and `random_string` call this at construction time rather than
    reading the module-level `settings`, so `SNAPLINE_LABEL_WIDTH` and
    `SNAPLINE_STATE_LENGTH` changes apply to new objects once
    `load_settings.cache_clear()` has run.
    """
    os.environ.setdefault("SNAPLINE_ENV", "dev")
    return Settings()


# Snapshot of the configuration at import time; prefer `load_settings()` in code
# that must see later overrides.
settings: Settings = load_settings()


def get_logger(name: str = "snapline") -> logging.Logger:
    """Return a logger for a snapline component (e.g. `snapline.history`).

    The core narrates captures, mutations and restores at DEBUG, so set
    `LOG_LEVEL=DEBUG` to follow a history step by step. Handlers are attached
    once per name and the level is refreshed on every call.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
