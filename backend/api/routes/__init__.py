"""API route modules."""

from .health import router as health_router
from .users import router as users_router
from .user_detail import router as user_detail_router

__all__ = [
    "health_router",
    "users_router",
    "user_detail_router",
]
