from fastapi import APIRouter, Depends

from fittrack.storage import Storage, get_storage

router = APIRouter()


@router.get("/health", summary="Is the API up, and which storage backs it?")
def health(storage: Storage = Depends(get_storage)):
    return {"ok": True, "storage": storage.backend}
