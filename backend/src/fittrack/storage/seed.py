from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional

from fittrack.schemas import (
    ActivityLogCreate,
    ExerciseCreate,
    GoalCreate,
    UserCreate,
    WorkoutCreate,
    parse_payload,
)
from fittrack.utils.dates import utcnow

if TYPE_CHECKING:  # pragma: no cover
    from .port import Storage

logger = logging.getLogger(__name__)

DEMO_USERNAME = "alex"

DEMO_USER = {
    "username": DEMO_USERNAME,
    "password": "password123",
    "displayName": "Alex Johnson",
    "email": "alex@example.com",
    "weight": 165,
    "height": 72,
    "avatarUrl": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=256&h=256&fit=facearea&facepad=2",
}


def seed_default_data(storage: "Storage", now: Optional[datetime] = None) -> bool:
    """Create the demo user with a few workouts, goals and today's activity log.

    Guarded by a username lookup, so running it on every start-up is safe.
    """
    if storage.users.get_by_username(DEMO_USERNAME) is not None:
        logger.info("demo user '%s' already present, skipping seed", DEMO_USERNAME)
        return False

    now = now or utcnow()
    day = timedelta(days=1)
    user = storage.users.create(parse_payload(UserCreate, DEMO_USER))

    workouts = [
        ("Cardio Session", "cardio", 45, 320, now, "Treadmill, Cycling", "completed"),
        ("Lower Body", "strength", 60, 420, now - day, "Squats, Lunges, Deadlifts", "completed"),
        ("HIIT Session", "hiit", 30, 380, now - 2 * day, "Circuit training", "completed"),
        ("Upper Body Strength", "strength", 45, 350, now + day, "Chest, shoulders, arms", "scheduled"),
    ]
    created = []
    for name, kind, minutes, kcal, when, notes, status in workouts:
        created.append(
            storage.workouts.create(
                WorkoutCreate(
                    user_id=user.id,
                    name=name,
                    type=kind,
                    duration=minutes,
                    calories_burned=kcal,
                    date=when,
                    notes=notes,
                    status=status,
                )
            )
        )

    upper_body = created[-1]
    for name, reps, weight in (("Bench Press", 10, 135), ("Shoulder Press", 12, 85), ("Bicep Curls", 15, 35)):
        storage.exercises.create(
            ExerciseCreate(workout_id=upper_body.id, name=name, sets=3, reps=reps, weight=weight)
        )

    storage.goals.create(
        GoalCreate(
            user_id=user.id,
            name="Lose 5 lbs",
            description="Weight loss goal",
            target_date=now + 30 * day,
            current_value=165,
            target_value=160,
            unit="lbs",
            status="in-progress",
        )
    )
    storage.goals.create(
        GoalCreate(
            user_id=user.id,
            name="Run 5K",
            description="Running distance goal",
            target_date=now + 45 * day,
            current_value=3.2,
            target_value=5,
            unit="K",
            status="in-progress",
        )
    )

    storage.activity_logs.create(
        ActivityLogCreate(user_id=user.id, date=now, steps=8243, active_minutes=68, calories_burned=1872)
    )
    logger.info("seeded demo data for user %s (id=%s)", DEMO_USERNAME, user.id)
    return True
