# slicemath/config.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Logging ---
    log_level: str = Field(default="WARNING")      # DEBUG | INFO | WARNING | ERROR | CRITICAL
    log_file: Optional[str] = None                 # rotating file handler when set

    # --- Products ---
    log_truncation: bool = True                    # DEBUG record when input lengths differ

    # Reads SLICEMATH_* envs and the repo-root .env
    model_config = SettingsConfigDict(
        env_prefix="SLICEMATH_",
        env_file=str(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"SLICEMATH_LOG_LEVEL must be a logging level name, got {v!r}")
        return v

# Singleton
settings = Settings()
