"""Behaviour every storage adapter must share; each test runs against both."""
from datetime import date, datetime

import pytest
from sqlalchemy.exc import StatementError

from fittrack.core.errors import ConstraintViolation, StorageUnavailable
from fittrack.schemas import (
    ActivityLogCreate,
    ExerciseCreate,
    ExerciseUpdate,
    GoalCreate,
    NutritionEntryCreate,
    UserCreate,
    UserUpdate,
    WorkoutUpdate,
)
from fittrack.storage import DatabaseStorage, MemoryStorage


def test_create_returns_input_plus_id(storage, user, make_workout):
    payload = make_workout(user.id, datetime(2024, 1, 1, 7, 30), notes="Easy pace")
    created = storage.workouts.create(payload)

    assert created.id is not None
    assert created.model_dump(exclude={"id"}) == payload.model_dump()


def test_ids_are_unique_per_entity(storage, user, make_workout):
    ids = {storage.workouts.create(make_workout(user.id, datetime(2024, 1, i))).id for i in range(1, 6)}
    assert len(ids) == 5


def test_ids_are_not_reused_after_delete(storage, user, make_workout):
    first = storage.workouts.create(make_workout(user.id, datetime(2024, 1, 1)))
    second = storage.workouts.create(make_workout(user.id, datetime(2024, 1, 2)))
    assert storage.workouts.delete(second.id)
    third = storage.workouts.create(make_workout(user.id, datetime(2024, 1, 3)))
    assert third.id not in (first.id, second.id)


def test_get_after_create_returns_equal_record(storage, user):
    assert storage.users.get(user.id) == user


def test_get_unknown_id_is_none(storage):
    assert storage.workouts.get(12345) is None
    assert storage.goals.get(12345) is None


def test_update_is_a_shallow_merge(storage, user, make_workout):
    workout = storage.workouts.create(make_workout(user.id, datetime(2024, 1, 1), status="scheduled"))

    updated = storage.workouts.update(workout.id, WorkoutUpdate(status="completed"))

    assert updated.status == "completed"
    assert updated.model_dump(exclude={"status"}) == workout.model_dump(exclude={"status"})
    assert storage.workouts.get(workout.id) == updated


def test_update_unknown_id_is_none(storage):
    assert storage.workouts.update(999, WorkoutUpdate(name="x")) is None


def test_delete_then_get_is_absent(storage, user, make_workout):
    workout = storage.workouts.create(make_workout(user.id, datetime(2024, 1, 1)))

    assert storage.workouts.delete(workout.id) is True
    assert storage.workouts.get(workout.id) is None
    assert storage.workouts.delete(workout.id) is False


def test_list_by_owner_without_records_is_empty_list(storage):
    assert storage.workouts.list_by_owner(42) == []
    assert storage.goals.list_by_owner(42) == []
    assert storage.nutrition.list_by_owner(42) == []
    assert storage.activity_logs.list_by_owner(42) == []
    assert storage.exercises.list_by_owner(42) == []


def test_workouts_are_listed_newest_first(storage, user, make_workout):
    for day in (1, 3, 2):
        storage.workouts.create(make_workout(user.id, datetime(2024, 1, day), name=f"Jan {day}"))

    listed = storage.workouts.list_by_owner(user.id)

    assert [w.date.date() for w in listed] == [date(2024, 1, 3), date(2024, 1, 2), date(2024, 1, 1)]


def test_list_by_owner_only_returns_that_owner(storage, user, make_workout):
    storage.workouts.create(make_workout(user.id, datetime(2024, 1, 1)))
    storage.workouts.create(make_workout(user.id + 100, datetime(2024, 1, 2)))
    assert [w.user_id for w in storage.workouts.list_by_owner(user.id)] == [user.id]


def test_nutrition_entries_are_listed_newest_first(storage, user):
    for day in ("2024-02-01", "2024-02-03", "2024-02-02"):
        storage.nutrition.create(NutritionEntryCreate(user_id=user.id, date=day, calories=500))
    listed = storage.nutrition.list_by_owner(user.id)
    assert [e.date.day for e in listed] == [3, 2, 1]


def test_goals_keep_insertion_order(storage, user):
    for name in ("Bench 200", "Run 10K", "Lose 5 lbs"):
        storage.goals.create(
            GoalCreate(
                user_id=user.id,
                name=name,
                description=name,
                target_date="2024-12-31",
                current_value=1,
                target_value=2,
                unit="x",
                status="in-progress",
            )
        )
    assert [g.name for g in storage.goals.list_by_owner(user.id)] == ["Bench 200", "Run 10K", "Lose 5 lbs"]


def test_activity_log_lookup_compares_calendar_date_only(storage, user):
    late = storage.activity_logs.create(
        ActivityLogCreate(user_id=user.id, date="2024-05-01T23:59:00", steps=9000)
    )
    storage.activity_logs.create(ActivityLogCreate(user_id=user.id, date="2024-05-02T00:01:00", steps=100))

    found = storage.activity_logs.get_for_owner_on_date(user.id, date(2024, 5, 1))

    assert found == late
    assert storage.activity_logs.get_for_owner_on_date(user.id, date(2024, 4, 30)) is None
    assert storage.activity_logs.get_for_owner_on_date(user.id + 1, date(2024, 5, 1)) is None
    assert storage.activity_logs.get_for_owner_on_date(user.id, date(2024, 5, 2)).steps == 100


def test_duplicate_username_is_a_constraint_violation(storage, user):
    with pytest.raises(ConstraintViolation) as excinfo:
        storage.users.create(
            UserCreate(username=user.username, password="x", display_name="Other", email="other@example.com")
        )
    assert excinfo.value.kind == "unique"
    assert excinfo.value.status_code == 409


def test_update_to_taken_email_is_a_constraint_violation(storage, user):
    other = storage.users.create(
        UserCreate(username="kim", password="x", display_name="Kim", email="kim@example.com")
    )
    with pytest.raises(ConstraintViolation):
        storage.users.update(other.id, UserUpdate(email=user.email))
    assert storage.users.get(other.id).email == "kim@example.com"


def test_user_can_keep_own_email_on_update(storage, user):
    updated = storage.users.update(user.id, UserUpdate(email=user.email, display_name="Sam R."))
    assert updated.display_name == "Sam R."


def test_exercise_must_reference_existing_workout(storage):
    with pytest.raises(ConstraintViolation) as excinfo:
        storage.exercises.create(ExerciseCreate(workout_id=404, name="Plank"))
    assert excinfo.value.kind == "reference"
    assert storage.exercises.list_by_owner(404) == []


def test_exercise_cannot_be_moved_to_missing_workout(storage, user, make_workout):
    workout = storage.workouts.create(make_workout(user.id, datetime(2024, 1, 1)))
    exercise = storage.exercises.create(ExerciseCreate(workout_id=workout.id, name="Plank"))
    with pytest.raises(ConstraintViolation):
        storage.exercises.update(exercise.id, ExerciseUpdate(workout_id=404))


def test_deleting_a_workout_keeps_its_exercises(storage, user, make_workout):
    workout = storage.workouts.create(make_workout(user.id, datetime(2024, 1, 1)))
    exercise = storage.exercises.create(
        ExerciseCreate(workout_id=workout.id, name="Squat", sets=5, reps=5, weight=185.5)
    )

    assert storage.workouts.delete(workout.id)

    assert storage.exercises.list_by_owner(workout.id) == [exercise]


def test_seed_default_data_is_idempotent(storage):
    assert storage.seed_default_data() is True
    assert storage.seed_default_data() is False

    alex = storage.users.get_by_username("alex")
    workouts = storage.workouts.list_by_owner(alex.id)
    assert len(workouts) == 4
    scheduled = [w for w in workouts if w.status == "scheduled"]
    assert len(scheduled) == 1
    assert [e.name for e in storage.exercises.list_by_owner(scheduled[0].id)] == [
        "Bench Press",
        "Shoulder Press",
        "Bicep Curls",
    ]
    assert len(storage.goals.list_by_owner(alex.id)) == 2
    assert len(storage.activity_logs.list_by_owner(alex.id)) == 1


def test_adapters_return_identical_records(tmp_path):
    memory = MemoryStorage(seed=False)
    database = DatabaseStorage.from_url(f"sqlite:///{tmp_path / 'same.db'}")
    database.init_schema()
    try:
        results = []
        for storage in (memory, database):
            u = storage.users.create(
                UserCreate(username="lee", password="pw", display_name="Lee", email="lee@example.com", weight=170.5)
            )
            entry = storage.nutrition.create(
                NutritionEntryCreate(user_id=u.id, date="2024-03-01T12:15:00Z", calories=640, protein=35.5)
            )
            results.append((u.model_dump(by_alias=True), entry.model_dump_json(by_alias=True)))
        assert results[0] == results[1]
    finally:
        database.close()


def test_every_dated_record_round_trips_as_naive_utc(storage, user, make_workout):
    workout = storage.workouts.create(make_workout(user.id, "2024-01-01"))
    goal = storage.goals.create(
        GoalCreate(
            user_id=user.id,
            name="Run 5K",
            description="Continuous 5K",
            target_date="2024-06-30T12:00:00+02:00",
            current_value=3.2,
            target_value=5,
            unit="km",
            status="in-progress",
        )
    )
    entry = storage.nutrition.create(NutritionEntryCreate(user_id=user.id, date="2024-01-01T20:15:00Z", calories=700))
    log = storage.activity_logs.create(ActivityLogCreate(user_id=user.id, date=date(2024, 1, 1), steps=3000))

    assert storage.workouts.get(workout.id).date == datetime(2024, 1, 1)
    assert storage.goals.get(goal.id).target_date == datetime(2024, 6, 30, 10, 0)
    assert storage.nutrition.get(entry.id).date == datetime(2024, 1, 1, 20, 15)
    assert storage.activity_logs.get(log.id).date == datetime(2024, 1, 1)
    assert storage.workouts.get(workout.id).date.tzinfo is None


def test_driver_side_value_errors_become_storage_unavailable(sql_storage):
    with pytest.raises(StorageUnavailable) as excinfo:
        with sql_storage.workouts._session():
            raise StatementError("bind failed", "INSERT INTO workouts ...", {}, ValueError("bad value"))
    assert excinfo.value.status_code == 503
    assert "bad value" in excinfo.value.message
