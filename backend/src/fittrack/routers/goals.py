from typing import List

from fastapi import APIRouter, Depends, Response, status

from fittrack.core.errors import NotFound
from fittrack.routers.params import PathId
from fittrack.schemas import GoalCreate, GoalRead, GoalUpdate
from fittrack.storage import Storage, get_storage

router = APIRouter(prefix="/api", tags=["goals"])


@router.post("/goals", response_model=GoalRead, status_code=status.HTTP_201_CREATED)
def create_goal(payload: GoalCreate, storage: Storage = Depends(get_storage)):
    return storage.goals.create(payload)


@router.get("/goals/{goal_id}", response_model=GoalRead)
def get_goal(goal_id: PathId, storage: Storage = Depends(get_storage)):
    goal = storage.goals.get(goal_id)
    if goal is None:
        raise NotFound("Goal not found")
    return goal


@router.get("/users/{user_id}/goals", response_model=List[GoalRead])
def list_user_goals(user_id: PathId, storage: Storage = Depends(get_storage)):
    return storage.goals.list_by_owner(user_id)


@router.put("/goals/{goal_id}", response_model=GoalRead)
def update_goal(goal_id: PathId, payload: GoalUpdate, storage: Storage = Depends(get_storage)):
    goal = storage.goals.update(goal_id, payload)
    if goal is None:
        raise NotFound("Goal not found")
    return goal


@router.delete("/goals/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_goal(goal_id: PathId, storage: Storage = Depends(get_storage)):
    if not storage.goals.delete(goal_id):
        raise NotFound("Goal not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
