"""FastAPI dependencies and require-helpers for routes."""

import logging
from typing import Annotated, Any

from fastapi import Body, Depends, HTTPException

from api.helpers import find_user_index
from config import get_settings
from repositories import FileStore, StoreProtocol

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"

# Raw JSON request body; field checks happen in the handlers, not in FastAPI.
JsonBody = Annotated[Any, Body()]


def get_store() -> StoreProtocol:
    """Return a store bound to the configured users file. Use in Depends()."""
    return FileStore(get_settings().USERS_FILE)


def require_user_index(users: list, user_id: str) -> int:
    """Index of the user with this id in users, or raise 404."""
    index = find_user_index(users, user_id)
    if index is None:
        logger.info("User %s not found", user_id)
        raise HTTPException(404, USER_NOT_FOUND)
    return index


def require_user(
    user_id: str,
    store: Annotated[StoreProtocol, Depends(get_store)],
) -> dict:
    """Load user by id or raise 404. Use as Depends(require_user) with user_id in path."""
    users = store.read()
    return users[require_user_index(users, user_id)]
