"""Pydantic schemas for API request/response."""

from .requests import UserCreate, UserUpdate

__all__ = [
    "UserCreate",
    "UserUpdate",
]
