from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, Mapping, Tuple, Type, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from fittrack.core.errors import ValidationFailed
from fittrack.utils.dates import normalize_timestamp

ModelT = TypeVar("ModelT", bound=BaseModel)

# Largest value a signed 64-bit INTEGER column holds.
SQL_INT_MAX = 2**63 - 1

NonEmptyStr = Annotated[str, Field(min_length=1)]
RecordId = Annotated[int, Field(le=SQL_INT_MAX)]
SqlInt = Annotated[int, Field(ge=-SQL_INT_MAX - 1, le=SQL_INT_MAX)]
Timestamp = Annotated[datetime, BeforeValidator(normalize_timestamp)]

# Conventional values offered by the client; the API keeps these fields open strings.
WORKOUT_TYPES = ("cardio", "strength", "hiit", "flexibility", "other")
WORKOUT_STATUSES = ("scheduled", "completed", "skipped")
GOAL_STATUSES = ("in-progress", "completed", "abandoned")


class ApiModel(BaseModel):
    """JSON uses camelCase, Python code the snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateModel(ApiModel):
    """Partial payload: unset fields are left alone by the storage layer."""

    # Fields that are required on create and therefore may not be sent as null.
    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*", mode="after")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name in cls.non_nullable:
            raise ValueError("must not be null")
        return value

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


def parse_payload(model: Type[ModelT], data: Mapping[str, Any]) -> ModelT:
    """Validate ``data`` against ``model``; raise ValidationFailed with field paths."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed.from_pydantic(exc.errors()) from exc
