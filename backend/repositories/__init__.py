"""Persistence layer: abstract interface and implementations."""

from .base import StoreProtocol
from .file_store import (
    STORE_CORRUPT,
    STORE_MISSING,
    STORE_OK,
    STORE_UNREADABLE,
    FileStore,
)

__all__ = [
    "StoreProtocol",
    "FileStore",
    "STORE_OK",
    "STORE_MISSING",
    "STORE_UNREADABLE",
    "STORE_CORRUPT",
]
