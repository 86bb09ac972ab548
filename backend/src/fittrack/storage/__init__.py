from __future__ import annotations

from fastapi import Request

from fittrack.core.config import Settings

from .database import DatabaseStorage
from .memory import MemoryStorage
from .port import Storage


def build_storage(settings: Settings) -> Storage:
    """Pick the adapter once, at process start."""
    if settings.uses_database:
        return DatabaseStorage.from_url(settings.database_url, echo=settings.database_echo)
    return MemoryStorage(seed=settings.seed_demo_data)


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


__all__ = ["DatabaseStorage", "MemoryStorage", "Storage", "build_storage", "get_storage"]
