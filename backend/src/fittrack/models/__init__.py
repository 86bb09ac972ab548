from .activity import ActivityLog
from .goals import Goal
from .nutrition import NutritionEntry
from .users import User
from .workouts import Exercise, Workout

__all__ = ["ActivityLog", "Exercise", "Goal", "NutritionEntry", "User", "Workout"]
