"""Shared helpers for API routes (lookup, id generation)."""

import time
from typing import Optional


def find_user_index(users: list, user_id: str) -> Optional[int]:
    """Return the index of the first user whose id equals user_id, else None."""
    for i, user in enumerate(users):
        if isinstance(user, dict) and user.get("id") == user_id:
            return i
    return None


def new_user_id() -> str:
    """Millisecond wall-clock timestamp as a decimal string. Not collision-proof."""
    return str(int(time.time() * 1000))
