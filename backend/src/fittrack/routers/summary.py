from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from fittrack.core.errors import NotFound
from fittrack.routers.params import PathId
from fittrack.schemas import UserPublic
from fittrack.schemas.summary import (
    ActivityTotals,
    DashboardResponse,
    DaySummary,
    GoalProgress,
    WeekSummaryResponse,
)
from fittrack.storage import Storage, get_storage
from fittrack.utils.dates import utcnow
from fittrack.utils.progress import (
    bucket_by_day,
    next_workout,
    nutrition_totals,
    progress_percent,
    recent_completed,
    split_workouts,
    window,
)

router = APIRouter(prefix="/api/users/{user_id}", tags=["summary"])


@router.get("/dashboard", response_model=DashboardResponse, summary="Everything the dashboard shows in one call")
def get_dashboard(user_id: PathId, storage: Storage = Depends(get_storage)):
    user = storage.users.get(user_id)
    if user is None:
        raise NotFound("User not found")

    now = utcnow()
    today = now.date()
    workouts = storage.workouts.list_by_owner(user_id)
    upcoming, _past = split_workouts(workouts, today)
    goals = storage.goals.list_by_owner(user_id)
    todays_entries = [e for e in storage.nutrition.list_by_owner(user_id) if e.date.date() == today]

    return DashboardResponse(
        user=UserPublic.from_user(user),
        next_workout=next_workout(workouts, now),
        upcoming_workouts=upcoming,
        recent_workouts=recent_completed(workouts),
        goals=[GoalProgress(goal=g, progress=progress_percent(g.current_value, g.target_value)) for g in goals],
        today_activity=storage.activity_logs.get_for_owner_on_date(user_id, today),
        today_nutrition=nutrition_totals(todays_entries),
    )


@router.get("/summary/week", response_model=WeekSummaryResponse, summary="Per-day workout, activity and intake totals")
def get_week_summary(
    user_id: PathId,
    end_day: Optional[date] = Query(default=None, alias="endDay"),
    days: int = Query(default=7, ge=1, le=31),
    storage: Storage = Depends(get_storage),
):
    span = window(end_day or utcnow().date(), days)

    workouts = [w for w in storage.workouts.list_by_owner(user_id) if w.status == "completed"]
    logs = storage.activity_logs.list_by_owner(user_id)
    entries = storage.nutrition.list_by_owner(user_id)

    columns = {
        "workouts": bucket_by_day(workouts, span, lambda w: 1),
        "workout_minutes": bucket_by_day(workouts, span, lambda w: w.duration),
        "workout_calories": bucket_by_day(workouts, span, lambda w: w.calories_burned),
        "steps": bucket_by_day(logs, span, lambda l: l.steps),
        "active_minutes": bucket_by_day(logs, span, lambda l: l.active_minutes),
        "activity_calories": bucket_by_day(logs, span, lambda l: l.calories_burned),
        "calories_consumed": bucket_by_day(entries, span, lambda e: e.calories),
    }

    details = [DaySummary(day=d, **{name: int(col[d]) for name, col in columns.items()}) for d in span]
    totals = ActivityTotals(**{name: int(sum(col.values())) for name, col in columns.items()})

    return WeekSummaryResponse(
        start_day=span[0],
        end_day=span[-1],
        days=days,
        totals=totals,
        days_detail=details,
    )
