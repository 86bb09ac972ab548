from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine


def _sqlite_connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        # Required for SQLite when used with FastAPI in threaded servers.
        return {"check_same_thread": False}
    return {}


def create_db_engine(url: str, echo: bool = False) -> Engine:
    return create_engine(
        url,
        echo=echo,
        connect_args=_sqlite_connect_args(url),
    )


def init_db(engine: Engine) -> None:
    # Import models so SQLModel sees the metadata.
    from fittrack import models  # noqa: F401  (import for side effect)

    SQLModel.metadata.create_all(engine)
