from typing import List

from fastapi import APIRouter, Depends, Response, status

from fittrack.core.errors import NotFound
from fittrack.routers.params import PathId
from fittrack.schemas import ExerciseRead, WorkoutCreate, WorkoutRead, WorkoutUpdate
from fittrack.storage import Storage, get_storage

router = APIRouter(prefix="/api", tags=["workouts"])


@router.post("/workouts", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, storage: Storage = Depends(get_storage)):
    return storage.workouts.create(payload)


@router.get("/workouts/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: PathId, storage: Storage = Depends(get_storage)):
    workout = storage.workouts.get(workout_id)
    if workout is None:
        raise NotFound("Workout not found")
    return workout


@router.get("/users/{user_id}/workouts", response_model=List[WorkoutRead], summary="Workouts of a user, newest first")
def list_user_workouts(user_id: PathId, storage: Storage = Depends(get_storage)):
    return storage.workouts.list_by_owner(user_id)


@router.put("/workouts/{workout_id}", response_model=WorkoutRead)
def update_workout(workout_id: PathId, payload: WorkoutUpdate, storage: Storage = Depends(get_storage)):
    workout = storage.workouts.update(workout_id, payload)
    if workout is None:
        raise NotFound("Workout not found")
    return workout


@router.delete("/workouts/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: PathId, storage: Storage = Depends(get_storage)):
    # exercises of the workout are left in place
    if not storage.workouts.delete(workout_id):
        raise NotFound("Workout not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/workouts/{workout_id}/exercises", response_model=List[ExerciseRead])
def list_workout_exercises(workout_id: PathId, storage: Storage = Depends(get_storage)):
    return storage.exercises.list_by_owner(workout_id)
