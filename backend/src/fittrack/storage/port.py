"""Storage interface the request handlers program against.

Every entity family gets a repository with the same five operations
(``create``/``get``/``list_by_owner``/``update``/``delete``). Two adapters
implement it: :mod:`fittrack.storage.memory` and :mod:`fittrack.storage.database`.
Callers never branch on which one they hold.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar

from pydantic import BaseModel

from fittrack.core.errors import ConstraintViolation
from fittrack.schemas import (
    ActivityLogCreate,
    ActivityLogRead,
    ActivityLogUpdate,
    ExerciseCreate,
    ExerciseRead,
    ExerciseUpdate,
    GoalCreate,
    GoalRead,
    GoalUpdate,
    NutritionEntryCreate,
    NutritionEntryRead,
    NutritionEntryUpdate,
    UpdateModel,
    UserCreate,
    UserRead,
    UserUpdate,
    WorkoutCreate,
    WorkoutRead,
    WorkoutUpdate,
)

CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=UpdateModel)
ReadT = TypeVar("ReadT", bound=BaseModel)


class Repository(ABC, Generic[CreateT, UpdateT, ReadT]):
    #: Human readable name used in error messages ("Workout", "Goal", ...).
    entity_name: str = "Record"

    def __init__(self) -> None:
        # field name -> repository whose ids that field must point at
        self.references: Dict[str, "Repository[Any, Any, Any]"] = {}

    @abstractmethod
    def create(self, payload: CreateT) -> ReadT:
        """Assign an id, store the record and return it in full."""

    @abstractmethod
    def get(self, record_id: int) -> Optional[ReadT]:
        """Return the record or ``None``; absence is not an error."""

    @abstractmethod
    def update(self, record_id: int, changes: UpdateT) -> Optional[ReadT]:
        """Shallow merge of the fields set on ``changes``; ``None`` if the id is unknown."""

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        """Remove the record. ``False`` if there was nothing to remove."""

    def _check_references(self, values: Mapping[str, Any]) -> None:
        for field, target in self.references.items():
            if field not in values:
                continue
            if target.get(values[field]) is None:
                raise ConstraintViolation(
                    f"{target.entity_name} {values[field]} does not exist",
                    kind="reference",
                )


class OwnedRepository(Repository[CreateT, UpdateT, ReadT]):
    @abstractmethod
    def list_by_owner(self, owner_id: int) -> List[ReadT]:
        """All records of one owner; an empty list when there are none."""


class UserRepository(Repository[UserCreate, UserUpdate, UserRead]):
    entity_name = "User"

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[UserRead]:
        ...


class ActivityLogRepository(OwnedRepository[ActivityLogCreate, ActivityLogUpdate, ActivityLogRead]):
    entity_name = "Activity log"

    @abstractmethod
    def get_for_owner_on_date(self, owner_id: int, day: date) -> Optional[ActivityLogRead]:
        """First log of ``owner_id`` whose timestamp falls on ``day`` (time of day ignored)."""


WorkoutRepository = OwnedRepository[WorkoutCreate, WorkoutUpdate, WorkoutRead]
ExerciseRepository = OwnedRepository[ExerciseCreate, ExerciseUpdate, ExerciseRead]
GoalRepository = OwnedRepository[GoalCreate, GoalUpdate, GoalRead]
NutritionRepository = OwnedRepository[NutritionEntryCreate, NutritionEntryUpdate, NutritionEntryRead]


class Storage(ABC):
    backend: str = "abstract"

    users: UserRepository
    workouts: WorkoutRepository
    exercises: ExerciseRepository
    goals: GoalRepository
    nutrition: NutritionRepository
    activity_logs: ActivityLogRepository

    def _link_references(self) -> None:
        self.exercises.references["workout_id"] = self.workouts

    def init_schema(self) -> None:
        """Prepare the backing store. No-op unless the adapter needs it."""

    def seed_default_data(self) -> bool:
        """Insert the demo user and its records once; ``False`` if already present."""
        from .seed import seed_default_data

        return seed_default_data(self)

    def close(self) -> None:
        pass
