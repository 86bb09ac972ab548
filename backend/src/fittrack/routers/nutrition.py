from typing import List

from fastapi import APIRouter, Depends, Response, status

from fittrack.core.errors import NotFound
from fittrack.routers.params import PathId
from fittrack.schemas import NutritionEntryCreate, NutritionEntryRead, NutritionEntryUpdate
from fittrack.storage import Storage, get_storage

router = APIRouter(prefix="/api", tags=["nutrition"])


@router.post("/nutrition", response_model=NutritionEntryRead, status_code=status.HTTP_201_CREATED)
def create_entry(payload: NutritionEntryCreate, storage: Storage = Depends(get_storage)):
    return storage.nutrition.create(payload)


@router.get("/nutrition/{entry_id}", response_model=NutritionEntryRead)
def get_entry(entry_id: PathId, storage: Storage = Depends(get_storage)):
    entry = storage.nutrition.get(entry_id)
    if entry is None:
        raise NotFound("Nutrition entry not found")
    return entry


@router.get("/users/{user_id}/nutrition", response_model=List[NutritionEntryRead], summary="Newest first")
def list_user_entries(user_id: PathId, storage: Storage = Depends(get_storage)):
    return storage.nutrition.list_by_owner(user_id)


@router.put("/nutrition/{entry_id}", response_model=NutritionEntryRead)
def update_entry(entry_id: PathId, payload: NutritionEntryUpdate, storage: Storage = Depends(get_storage)):
    entry = storage.nutrition.update(entry_id, payload)
    if entry is None:
        raise NotFound("Nutrition entry not found")
    return entry


@router.delete("/nutrition/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(entry_id: PathId, storage: Storage = Depends(get_storage)):
    if not storage.nutrition.delete(entry_id):
        raise NotFound("Nutrition entry not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
