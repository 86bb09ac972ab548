from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from fittrack.schemas import NutritionEntryRead, WorkoutRead
from fittrack.schemas.summary import NutritionTotals

from .dates import as_day

T = TypeVar("T")


def progress_percent(current: Optional[float], target: Optional[float]) -> int:
    """Goal progress in whole percent; 0 when there is no usable target."""
    if not target:
        return 0
    return round(float(current or 0.0) / float(target) * 100)


def split_workouts(workouts: Iterable[WorkoutRead], today: date) -> Tuple[List[WorkoutRead], List[WorkoutRead]]:
    """Upcoming (scheduled, not before today, soonest first) and past (newest first).

    A scheduled workout dated before today counts as past.
    """
    upcoming: List[WorkoutRead] = []
    past: List[WorkoutRead] = []
    for w in workouts:
        before_today = w.date.date() < today
        if w.status == "scheduled" and not before_today:
            upcoming.append(w)
        if w.status == "completed" or before_today:
            past.append(w)
    upcoming.sort(key=lambda w: w.date)
    past.sort(key=lambda w: w.date, reverse=True)
    return upcoming, past


def next_workout(workouts: Iterable[WorkoutRead], now: datetime) -> Optional[WorkoutRead]:
    candidates = [w for w in workouts if w.status == "scheduled" and w.date > now]
    return min(candidates, key=lambda w: w.date) if candidates else None


def recent_completed(workouts: Iterable[WorkoutRead], limit: int = 5) -> List[WorkoutRead]:
    done = sorted((w for w in workouts if w.status == "completed"), key=lambda w: w.date, reverse=True)
    return done[:limit]


def window(end_day: date, days: int) -> List[date]:
    start = end_day - timedelta(days=days - 1)
    return [start + timedelta(days=i) for i in range(days)]


def bucket_by_day(
    records: Iterable[T],
    days: Sequence[date],
    value: Callable[[T], float],
    when: Callable[[T], object] = lambda r: getattr(r, "date"),
) -> Dict[date, float]:
    """Sum ``value(record)`` per calendar day; records outside ``days`` are ignored."""
    buckets: Dict[date, float] = {d: 0 for d in days}
    for record in records:
        d = as_day(when(record))
        if d in buckets:
            buckets[d] += value(record) or 0
    return buckets


def nutrition_totals(entries: Iterable[NutritionEntryRead]) -> NutritionTotals:
    totals = NutritionTotals()
    for e in entries:
        totals.calories += e.calories or 0
        totals.protein += e.protein or 0.0
        totals.carbs += e.carbs or 0.0
        totals.fat += e.fat or 0.0
    totals.protein = round(totals.protein, 1)
    totals.carbs = round(totals.carbs, 1)
    totals.fat = round(totals.fat, 1)
    return totals
