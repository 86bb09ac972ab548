from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BACKEND_ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = BACKEND_ROOT / ".env"
DEFAULT_DB_PATH = BACKEND_ROOT / "fittrack.db"


class Settings(BaseSettings):
    """Process configuration; every field can be set from the environment or ``backend/.env``."""

    model_config = SettingsConfigDict(env_file=str(ENV_PATH), env_file_encoding="utf-8", extra="ignore")

    app_name: str = "FitTrack API"
    app_version: str = "0.1.0"
    docs_url: str = "/docs"

    storage_backend: Literal["memory", "database"] = "memory"
    database_url: str = f"sqlite:///{DEFAULT_DB_PATH.as_posix()}"
    database_echo: bool = False
    seed_demo_data: bool = True

    log_level: str = "INFO"

    # used by launch_main_api.py only
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def uses_database(self) -> bool:
        return self.storage_backend == "database"


@lru_cache
def get_settings() -> Settings:
    # values already exported in the shell win over backend/.env
    load_dotenv(ENV_PATH, override=False)
    return Settings()
