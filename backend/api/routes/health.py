"""Liveness plus the state of the users file.

A corrupt or unreadable file still reads as an empty collection through the
API; this endpoint is where operators can tell the two apart.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from api.deps import get_store
from config import get_settings
from repositories import STORE_MISSING, STORE_OK, StoreProtocol

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(store: Annotated[StoreProtocol, Depends(get_store)]):
    store_info = store.check()
    healthy = store_info["state"] in (STORE_OK, STORE_MISSING)
    return {
        "status": "ok" if healthy else "degraded",
        "version": get_settings().APP_VERSION,
        "store": store_info,
    }
