from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type

from pydantic import BaseModel

from fittrack.core.errors import ConstraintViolation
from fittrack.schemas import (
    ActivityLogRead,
    ExerciseRead,
    GoalRead,
    NutritionEntryRead,
    UserRead,
    WorkoutRead,
)
from fittrack.utils.dates import as_day

from .port import ActivityLogRepository, OwnedRepository, Repository, Storage, UserRepository


class MemoryRepository(Repository):
    """Dict keyed by id plus a counter seeded at 1. Not safe for parallel writers."""

    def __init__(
        self,
        read_model: Type[BaseModel],
        entity_name: str,
        unique_fields: Sequence[str] = (),
    ):
        super().__init__()
        self._read_model = read_model
        self.entity_name = entity_name
        self._unique_fields = tuple(unique_fields)
        self._rows: Dict[int, BaseModel] = {}
        self._next_id = 1

    def _check_unique(self, values: Mapping[str, Any], skip_id: Optional[int] = None) -> None:
        for field in self._unique_fields:
            if field not in values:
                continue
            for row_id, row in self._rows.items():
                if row_id != skip_id and getattr(row, field) == values[field]:
                    raise ConstraintViolation(f"{field} '{values[field]}' already exists")

    def create(self, payload):
        values = payload.model_dump()
        self._check_references(values)
        self._check_unique(values)
        record = self._read_model(id=self._next_id, **values)
        self._rows[self._next_id] = record
        self._next_id += 1
        return record.model_copy()

    def get(self, record_id: int):
        row = self._rows.get(record_id)
        return row.model_copy() if row is not None else None

    def update(self, record_id: int, changes):
        row = self._rows.get(record_id)
        if row is None:
            return None
        values = changes.changes()
        self._check_references(values)
        self._check_unique(values, skip_id=record_id)
        updated = row.model_copy(update=values)
        self._rows[record_id] = updated
        return updated.model_copy()

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None


class MemoryOwnedRepository(MemoryRepository, OwnedRepository):
    def __init__(
        self,
        read_model: Type[BaseModel],
        entity_name: str,
        owner_field: str,
        newest_first_by: Optional[str] = None,
    ):
        super().__init__(read_model, entity_name)
        self._owner_field = owner_field
        self._newest_first_by = newest_first_by

    def list_by_owner(self, owner_id: int) -> List[Any]:
        rows = [row.model_copy() for row in self._rows.values() if getattr(row, self._owner_field) == owner_id]
        if self._newest_first_by:
            # sort is stable, so equal dates keep insertion order
            rows.sort(key=lambda r: getattr(r, self._newest_first_by), reverse=True)
        return rows


class MemoryUserRepository(MemoryRepository, UserRepository):
    def __init__(self):
        super().__init__(UserRead, "User", unique_fields=("username", "email"))

    def get_by_username(self, username: str) -> Optional[UserRead]:
        for row in self._rows.values():
            if row.username == username:
                return row.model_copy()
        return None


class MemoryActivityLogRepository(MemoryOwnedRepository, ActivityLogRepository):
    def __init__(self):
        super().__init__(ActivityLogRead, "Activity log", owner_field="user_id", newest_first_by="date")

    def get_for_owner_on_date(self, owner_id: int, day: date) -> Optional[ActivityLogRead]:
        wanted = as_day(day)
        for row in self._rows.values():
            if row.user_id == owner_id and row.date.date() == wanted:
                return row.model_copy()
        return None


class MemoryStorage(Storage):
    """Process-local storage. Data is gone when the process exits."""

    backend = "memory"

    def __init__(self, seed: bool = True):
        self.users = MemoryUserRepository()
        self.workouts = MemoryOwnedRepository(WorkoutRead, "Workout", owner_field="user_id", newest_first_by="date")
        self.exercises = MemoryOwnedRepository(ExerciseRead, "Exercise", owner_field="workout_id")
        self.goals = MemoryOwnedRepository(GoalRead, "Goal", owner_field="user_id")
        self.nutrition = MemoryOwnedRepository(
            NutritionEntryRead, "Nutrition entry", owner_field="user_id", newest_first_by="date"
        )
        self.activity_logs = MemoryActivityLogRepository()
        self._link_references()
        if seed:
            self.seed_default_data()
