"""User collection: list and create."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from api.deps import JsonBody, get_store
from api.helpers import new_user_id
from repositories import StoreProtocol
from schemas.requests import UserCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(store: Annotated[StoreProtocol, Depends(get_store)]):
    return JSONResponse(store.read())


@router.post("")
async def create_user(
    store: Annotated[StoreProtocol, Depends(get_store)],
    body: JsonBody = None,
):
    data = UserCreate.from_body(body)
    if not data.is_complete():
        logger.info("Rejected user create, fields sent: %s", sorted(data.model_fields_set))
        raise HTTPException(400, "Missing name, email, or age")

    users = store.read()
    user = {
        "id": new_user_id(),
        "name": data.name,
        "email": data.email,
        "age": data.age,
    }
    users.append(user)
    store.write(users)
    logger.info("Created user %s (%d total)", user["id"], len(users))
    return JSONResponse(user, status_code=201)
