import tempfile
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import AsyncIterator, Iterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from fittrack.core.config import Settings
from fittrack.main import create_app
from fittrack.schemas import UserCreate, WorkoutCreate
from fittrack.storage import DatabaseStorage, MemoryStorage, Storage


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", seed_demo_data=False, log_level="WARNING")


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage(seed=False)


@pytest.fixture
def sql_storage() -> Iterator[DatabaseStorage]:
    # Fresh SQLite file in a temp dir per test for isolation
    tmp = tempfile.TemporaryDirectory()
    db_path = Path(tmp.name) / "test.db"
    storage = DatabaseStorage.from_url(f"sqlite:///{db_path}")
    storage.init_schema()
    try:
        yield storage
    finally:
        with suppress(Exception):
            storage.close()
        tmp.cleanup()


@pytest.fixture(params=["memory", "database"])
def storage(request) -> Storage:
    """Every test using this runs once per adapter."""
    name = "memory_storage" if request.param == "memory" else "sql_storage"
    return request.getfixturevalue(name)


@pytest.fixture
def test_app(storage: Storage, settings: Settings) -> FastAPI:
    return create_app(settings=settings, storage=storage)


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def user(storage: Storage):
    return storage.users.create(
        UserCreate(
            username="sam",
            password="secret",
            display_name="Sam Runner",
            email="sam@example.com",
            weight=150,
            height=68,
        )
    )


@pytest.fixture
def make_workout():
    def _make(user_id: int, when: datetime, **overrides) -> WorkoutCreate:
        data = dict(
            user_id=user_id,
            name="Morning Run",
            type="cardio",
            duration=30,
            calories_burned=250,
            date=when,
            status="completed",
        )
        data.update(overrides)
        return WorkoutCreate(**data)

    return _make
