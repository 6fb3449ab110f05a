"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

ENV_PERSISTENCE_FILE_PATH = "EXSTATUS_PERSISTENCE_FILE_PATH"
ENV_LOG_LEVEL = "EXSTATUS_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseModel):
    """Resolved settings for the status persister and CLI."""
    persistence_file_path: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


def _from_env(env: Mapping[str, str], var_name: str) -> Optional[str]:
    raw = env.get(var_name)
    if not raw:
        return None
    return raw


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    Args:
        env: Mapping to read instead of ``os.environ`` (for tests).
    """
    if env is None:
        env = os.environ

    file_path = _from_env(env, ENV_PERSISTENCE_FILE_PATH)
    return Settings(
        persistence_file_path=Path(file_path) if file_path else None,
        log_level=_from_env(env, ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL,
    )
