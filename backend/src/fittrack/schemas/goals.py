from typing import Annotated, ClassVar, Optional, Tuple

from pydantic import Field

from .base import ApiModel, NonEmptyStr, RecordId, Timestamp, UpdateModel

TargetValue = Annotated[float, Field(gt=0)]


class GoalBase(ApiModel):
    user_id: RecordId
    name: NonEmptyStr
    description: NonEmptyStr
    target_date: Timestamp
    current_value: float
    target_value: TargetValue
    unit: NonEmptyStr
    status: NonEmptyStr


class GoalCreate(GoalBase):
    pass


class GoalRead(GoalBase):
    id: int


class GoalUpdate(UpdateModel):
    non_nullable: ClassVar[Tuple[str, ...]] = (
        "user_id",
        "name",
        "description",
        "target_date",
        "current_value",
        "target_value",
        "unit",
        "status",
    )

    user_id: Optional[RecordId] = None
    name: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    target_date: Optional[Timestamp] = None
    current_value: Optional[float] = None
    target_value: Optional[TargetValue] = None
    unit: Optional[NonEmptyStr] = None
    status: Optional[NonEmptyStr] = None
