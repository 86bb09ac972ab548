from fastapi import APIRouter, Depends, HTTPException

from fittrack.schemas import LoginRequest, UserPublic
from fittrack.storage import Storage, get_storage

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=UserPublic, summary="Demo login (plaintext comparison)")
def login(payload: LoginRequest, storage: Storage = Depends(get_storage)):
    if not payload.username or not payload.password:
        raise HTTPException(400, "Username and password required")

    user = storage.users.get_by_username(payload.username)
    # TODO: store a password hash and compare with hmac.compare_digest before this leaves demo use
    if user is None or user.password != payload.password:
        raise HTTPException(401, "Invalid credentials")

    return UserPublic.from_user(user)
