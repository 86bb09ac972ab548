from datetime import date
from typing import List, Optional

from .activity import ActivityLogRead
from .base import ApiModel
from .goals import GoalRead
from .users import UserPublic
from .workouts import WorkoutRead


class GoalProgress(ApiModel):
    goal: GoalRead
    progress: int  # percent, rounded


class NutritionTotals(ApiModel):
    calories: int = 0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


class DashboardResponse(ApiModel):
    user: UserPublic
    next_workout: Optional[WorkoutRead] = None
    upcoming_workouts: List[WorkoutRead] = []
    recent_workouts: List[WorkoutRead] = []
    goals: List[GoalProgress] = []
    today_activity: Optional[ActivityLogRead] = None
    today_nutrition: NutritionTotals


class ActivityTotals(ApiModel):
    workouts: int = 0
    workout_minutes: int = 0
    workout_calories: int = 0
    steps: int = 0
    active_minutes: int = 0
    activity_calories: int = 0
    calories_consumed: int = 0


class DaySummary(ActivityTotals):
    day: date


class WeekSummaryResponse(ApiModel):
    start_day: date
    end_day: date
    days: int
    totals: ActivityTotals
    days_detail: List[DaySummary]
