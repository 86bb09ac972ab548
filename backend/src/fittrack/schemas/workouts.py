from typing import Annotated, ClassVar, Optional, Tuple

from pydantic import Field

from .base import SQL_INT_MAX, ApiModel, NonEmptyStr, RecordId, SqlInt, Timestamp, UpdateModel

Minutes = Annotated[int, Field(ge=1, le=SQL_INT_MAX)]


class WorkoutBase(ApiModel):
    user_id: RecordId
    name: NonEmptyStr
    type: NonEmptyStr
    duration: Minutes
    calories_burned: Optional[SqlInt] = None
    date: Timestamp
    notes: Optional[str] = None
    status: NonEmptyStr


class WorkoutCreate(WorkoutBase):
    pass


class WorkoutRead(WorkoutBase):
    id: int


class WorkoutUpdate(UpdateModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("user_id", "name", "type", "duration", "date", "status")

    user_id: Optional[RecordId] = None
    name: Optional[NonEmptyStr] = None
    type: Optional[NonEmptyStr] = None
    duration: Optional[Minutes] = None
    calories_burned: Optional[SqlInt] = None
    date: Optional[Timestamp] = None
    notes: Optional[str] = None
    status: Optional[NonEmptyStr] = None


class ExerciseBase(ApiModel):
    workout_id: RecordId
    name: NonEmptyStr
    sets: Optional[SqlInt] = None
    reps: Optional[SqlInt] = None
    weight: Optional[float] = None
    duration: Optional[SqlInt] = None
    distance: Optional[float] = None


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    id: int


class ExerciseUpdate(UpdateModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("workout_id", "name")

    workout_id: Optional[RecordId] = None
    name: Optional[NonEmptyStr] = None
    sets: Optional[SqlInt] = None
    reps: Optional[SqlInt] = None
    weight: Optional[float] = None
    duration: Optional[SqlInt] = None
    distance: Optional[float] = None
