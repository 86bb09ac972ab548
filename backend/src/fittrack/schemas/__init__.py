from .activity import ActivityLogCreate, ActivityLogRead, ActivityLogUpdate
from .base import (
    GOAL_STATUSES,
    WORKOUT_STATUSES,
    WORKOUT_TYPES,
    ApiModel,
    UpdateModel,
    parse_payload,
)
from .goals import GoalCreate, GoalRead, GoalUpdate
from .nutrition import NutritionEntryCreate, NutritionEntryRead, NutritionEntryUpdate
from .users import LoginRequest, UserCreate, UserPublic, UserRead, UserUpdate
from .workouts import (
    ExerciseCreate,
    ExerciseRead,
    ExerciseUpdate,
    WorkoutCreate,
    WorkoutRead,
    WorkoutUpdate,
)

__all__ = [
    "GOAL_STATUSES",
    "WORKOUT_STATUSES",
    "WORKOUT_TYPES",
    "ActivityLogCreate",
    "ActivityLogRead",
    "ActivityLogUpdate",
    "ApiModel",
    "ExerciseCreate",
    "ExerciseRead",
    "ExerciseUpdate",
    "GoalCreate",
    "GoalRead",
    "GoalUpdate",
    "LoginRequest",
    "NutritionEntryCreate",
    "NutritionEntryRead",
    "NutritionEntryUpdate",
    "UpdateModel",
    "UserCreate",
    "UserPublic",
    "UserRead",
    "UserUpdate",
    "WorkoutCreate",
    "WorkoutRead",
    "WorkoutUpdate",
    "parse_payload",
]
