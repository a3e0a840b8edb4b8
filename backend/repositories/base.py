"""Abstract persistence interface for the user collection."""

from typing import Protocol


class StoreProtocol(Protocol):
    """Loads and saves the whole user collection as a single unit."""

    def read(self) -> list[dict]:
        ...

    def write(self, users: list[dict]) -> None:
        ...

    def check(self) -> dict:
        ...
