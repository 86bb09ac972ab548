from fastapi import APIRouter, Depends, Response, status

from fittrack.core.errors import NotFound
from fittrack.routers.params import PathId
from fittrack.schemas import ExerciseCreate, ExerciseRead, ExerciseUpdate
from fittrack.storage import Storage, get_storage

router = APIRouter(prefix="/api/exercises", tags=["exercises"])


@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(payload: ExerciseCreate, storage: Storage = Depends(get_storage)):
    return storage.exercises.create(payload)


@router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(exercise_id: PathId, storage: Storage = Depends(get_storage)):
    exercise = storage.exercises.get(exercise_id)
    if exercise is None:
        raise NotFound("Exercise not found")
    return exercise


@router.put("/{exercise_id}", response_model=ExerciseRead)
def update_exercise(exercise_id: PathId, payload: ExerciseUpdate, storage: Storage = Depends(get_storage)):
    exercise = storage.exercises.update(exercise_id, payload)
    if exercise is None:
        raise NotFound("Exercise not found")
    return exercise


@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(exercise_id: PathId, storage: Storage = Depends(get_storage)):
    if not storage.exercises.delete(exercise_id):
        raise NotFound("Exercise not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
