from typing import Annotated, ClassVar, Optional, Tuple

from pydantic import Field

from .base import SQL_INT_MAX, ApiModel, RecordId, Timestamp, UpdateModel

Calories = Annotated[int, Field(ge=1, le=SQL_INT_MAX)]


class NutritionEntryBase(ApiModel):
    user_id: RecordId
    date: Timestamp
    calories: Calories
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    notes: Optional[str] = None


class NutritionEntryCreate(NutritionEntryBase):
    pass


class NutritionEntryRead(NutritionEntryBase):
    id: int


class NutritionEntryUpdate(UpdateModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("user_id", "date", "calories")

    user_id: Optional[RecordId] = None
    date: Optional[Timestamp] = None
    calories: Optional[Calories] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    notes: Optional[str] = None
