"""Single user by id: fetch, update, delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import JsonBody, get_store, require_user, require_user_index
from repositories import StoreProtocol
from schemas.requests import UserUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}")
async def get_user(user: Annotated[dict, Depends(require_user)]):
    return JSONResponse(user)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    store: Annotated[StoreProtocol, Depends(get_store)],
    body: JsonBody = None,
):
    users = store.read()
    index = require_user_index(users, user_id)
    changes = UserUpdate.from_body(body).changes()
    users[index].update(changes)
    store.write(users)
    logger.info("Updated user %s (%s)", user_id, ", ".join(changes) or "no fields")
    return JSONResponse(users[index])


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    store: Annotated[StoreProtocol, Depends(get_store)],
):
    users = store.read()
    index = require_user_index(users, user_id)
    deleted = users.pop(index)
    store.write(users)
    logger.info("Deleted user %s (%d remaining)", user_id, len(users))
    return JSONResponse(deleted)
