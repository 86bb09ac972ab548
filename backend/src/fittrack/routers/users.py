from fastapi import APIRouter, Depends, Response, status

from fittrack.core.errors import NotFound
from fittrack.routers.params import PathId
from fittrack.schemas import UserCreate, UserPublic, UserUpdate
from fittrack.storage import Storage, get_storage

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED, summary="Register a user")
def create_user(payload: UserCreate, storage: Storage = Depends(get_storage)):
    return UserPublic.from_user(storage.users.create(payload))


@router.get("/{user_id}", response_model=UserPublic)
def get_user(user_id: PathId, storage: Storage = Depends(get_storage)):
    user = storage.users.get(user_id)
    if user is None:
        raise NotFound("User not found")
    return UserPublic.from_user(user)


@router.put("/{user_id}", response_model=UserPublic, summary="Partial update of a user profile")
def update_user(user_id: PathId, payload: UserUpdate, storage: Storage = Depends(get_storage)):
    user = storage.users.update(user_id, payload)
    if user is None:
        raise NotFound("User not found")
    return UserPublic.from_user(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: PathId, storage: Storage = Depends(get_storage)):
    if not storage.users.delete(user_id):
        raise NotFound("User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
