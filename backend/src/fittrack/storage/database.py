from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date
from typing import Any, Iterator, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, IntegrityError, StatementError
from sqlmodel import Session, SQLModel, select

from fittrack.core.database import create_db_engine, init_db
from fittrack.core.errors import ConstraintViolation, StorageUnavailable
from fittrack.models import ActivityLog, Exercise, Goal, NutritionEntry, User, Workout
from fittrack.schemas import (
    ActivityLogRead,
    ExerciseRead,
    GoalRead,
    NutritionEntryRead,
    UserRead,
    WorkoutRead,
)
from fittrack.utils.dates import as_day, day_bounds

from .port import ActivityLogRepository, OwnedRepository, Repository, Storage, UserRepository

logger = logging.getLogger(__name__)


class SqlRepository(Repository):
    """One table, one short-lived Session per call."""

    def __init__(
        self,
        engine: Engine,
        table: Type[SQLModel],
        read_model: Type[BaseModel],
        entity_name: str,
    ):
        super().__init__()
        self._engine = engine
        self._table = table
        self._read_model = read_model
        self.entity_name = entity_name

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with Session(self._engine) as session:
            try:
                yield session
            except IntegrityError as e:
                session.rollback()
                # e.g. duplicate username or email
                raise ConstraintViolation(f"Constraint error: {e.orig}") from e
            except DBAPIError as e:
                session.rollback()
                raise StorageUnavailable(f"DB error: {e.orig}") from e
            except StatementError as e:
                # value rejected while binding parameters, before the driver saw it
                session.rollback()
                raise StorageUnavailable(f"DB error: {e.orig}") from e

    def _to_read(self, row: SQLModel) -> Any:
        return self._read_model.model_validate(row.model_dump())

    def create(self, payload):
        values = payload.model_dump()
        self._check_references(values)
        with self._session() as session:
            row = self._table(**values)
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_read(row)

    def get(self, record_id: int):
        with self._session() as session:
            row = session.get(self._table, record_id)
            return self._to_read(row) if row is not None else None

    def update(self, record_id: int, changes):
        values = changes.changes()
        with self._session() as session:
            row = session.get(self._table, record_id)
            if row is None:
                return None
            self._check_references(values)
            # only the fields present in the payload
            for k, v in values.items():
                setattr(row, k, v)
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_read(row)

    def delete(self, record_id: int) -> bool:
        with self._session() as session:
            row = session.get(self._table, record_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True


class SqlOwnedRepository(SqlRepository, OwnedRepository):
    def __init__(
        self,
        engine: Engine,
        table: Type[SQLModel],
        read_model: Type[BaseModel],
        entity_name: str,
        owner_field: str,
        newest_first_by: Optional[str] = None,
    ):
        super().__init__(engine, table, read_model, entity_name)
        self._owner_field = owner_field
        self._newest_first_by = newest_first_by

    def list_by_owner(self, owner_id: int) -> List[Any]:
        stmt = select(self._table).where(getattr(self._table, self._owner_field) == owner_id)
        if self._newest_first_by:
            stmt = stmt.order_by(getattr(self._table, self._newest_first_by).desc())
        stmt = stmt.order_by(self._table.id.asc())
        with self._session() as session:
            return [self._to_read(row) for row in session.exec(stmt).all()]


class SqlUserRepository(SqlRepository, UserRepository):
    def __init__(self, engine: Engine):
        super().__init__(engine, User, UserRead, "User")

    def get_by_username(self, username: str) -> Optional[UserRead]:
        with self._session() as session:
            row = session.exec(select(User).where(User.username == username)).first()
            return self._to_read(row) if row is not None else None


class SqlActivityLogRepository(SqlOwnedRepository, ActivityLogRepository):
    def __init__(self, engine: Engine):
        super().__init__(
            engine, ActivityLog, ActivityLogRead, "Activity log", owner_field="user_id", newest_first_by="date"
        )

    def get_for_owner_on_date(self, owner_id: int, day: date) -> Optional[ActivityLogRead]:
        start, end = day_bounds(as_day(day))
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.user_id == owner_id)
            .where(ActivityLog.date >= start)
            .where(ActivityLog.date < end)
            .order_by(ActivityLog.id.asc())
        )
        with self._session() as session:
            row = session.exec(stmt).first()
            return self._to_read(row) if row is not None else None


class DatabaseStorage(Storage):
    """Relational adapter; ids come from the database sequence."""

    backend = "database"

    def __init__(self, engine: Engine):
        self.engine = engine
        self.users = SqlUserRepository(engine)
        self.workouts = SqlOwnedRepository(
            engine, Workout, WorkoutRead, "Workout", owner_field="user_id", newest_first_by="date"
        )
        self.exercises = SqlOwnedRepository(engine, Exercise, ExerciseRead, "Exercise", owner_field="workout_id")
        self.goals = SqlOwnedRepository(engine, Goal, GoalRead, "Goal", owner_field="user_id")
        self.nutrition = SqlOwnedRepository(
            engine, NutritionEntry, NutritionEntryRead, "Nutrition entry", owner_field="user_id", newest_first_by="date"
        )
        self.activity_logs = SqlActivityLogRepository(engine)
        self._link_references()

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "DatabaseStorage":
        return cls(create_db_engine(url, echo=echo))

    def init_schema(self) -> None:
        try:
            init_db(self.engine)
        except DBAPIError as e:
            raise StorageUnavailable(f"DB error: {e.orig}") from e
        logger.info("database schema ready (%s)", self.engine.url.render_as_string(hide_password=True))

    def close(self) -> None:
        self.engine.dispose()
