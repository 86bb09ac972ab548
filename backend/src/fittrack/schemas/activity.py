from typing import ClassVar, Optional, Tuple

from .base import ApiModel, RecordId, SqlInt, Timestamp, UpdateModel


class ActivityLogBase(ApiModel):
    user_id: RecordId
    date: Timestamp
    steps: Optional[SqlInt] = None
    active_minutes: Optional[SqlInt] = None
    calories_burned: Optional[SqlInt] = None


class ActivityLogCreate(ActivityLogBase):
    pass


class ActivityLogRead(ActivityLogBase):
    id: int


class ActivityLogUpdate(UpdateModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("user_id", "date")

    user_id: Optional[RecordId] = None
    date: Optional[Timestamp] = None
    steps: Optional[SqlInt] = None
    active_minutes: Optional[SqlInt] = None
    calories_burned: Optional[SqlInt] = None
