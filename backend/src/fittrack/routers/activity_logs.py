from typing import List

from fastapi import APIRouter, Depends, Response, status

from fittrack.core.errors import NotFound
from fittrack.routers.params import PathId
from fittrack.schemas import ActivityLogCreate, ActivityLogRead, ActivityLogUpdate
from fittrack.storage import Storage, get_storage
from fittrack.utils.dates import utcnow

router = APIRouter(prefix="/api", tags=["activity"])


@router.post("/activity-logs", response_model=ActivityLogRead, status_code=status.HTTP_201_CREATED)
def create_log(payload: ActivityLogCreate, storage: Storage = Depends(get_storage)):
    return storage.activity_logs.create(payload)


@router.get("/activity-logs/{log_id}", response_model=ActivityLogRead)
def get_log(log_id: PathId, storage: Storage = Depends(get_storage)):
    log = storage.activity_logs.get(log_id)
    if log is None:
        raise NotFound("Activity log not found")
    return log


@router.get("/users/{user_id}/activity-logs", response_model=List[ActivityLogRead])
def list_user_logs(user_id: PathId, storage: Storage = Depends(get_storage)):
    return storage.activity_logs.list_by_owner(user_id)


@router.get("/users/{user_id}/activity-logs/today", response_model=ActivityLogRead, summary="Log for the current UTC day")
def get_today_log(user_id: PathId, storage: Storage = Depends(get_storage)):
    log = storage.activity_logs.get_for_owner_on_date(user_id, utcnow().date())
    if log is None:
        raise NotFound("No activity log found for today")
    return log


@router.put("/activity-logs/{log_id}", response_model=ActivityLogRead)
def update_log(log_id: PathId, payload: ActivityLogUpdate, storage: Storage = Depends(get_storage)):
    log = storage.activity_logs.update(log_id, payload)
    if log is None:
        raise NotFound("Activity log not found")
    return log


@router.delete("/activity-logs/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_log(log_id: PathId, storage: Storage = Depends(get_storage)):
    if not storage.activity_logs.delete(log_id):
        raise NotFound("Activity log not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
