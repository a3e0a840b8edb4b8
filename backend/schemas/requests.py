"""Request body models for the Users API.

Field values are stored exactly as sent: no type checks, no coercion.
Only presence matters, so the models track which keys the client supplied.
"""

from typing import Any, Optional

from pydantic import BaseModel


def _truthy(value: Any) -> bool:
    """JSON truthiness as clients expect it: [] and {} count as values, 0 and NaN do not."""
    if value is None or value == "":
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    return True


def _as_object(body: Any) -> dict:
    # A non-object JSON body (array, string, null) carries no fields.
    return body if isinstance(body, dict) else {}


class UserCreate(BaseModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    age: Optional[Any] = None

    @classmethod
    def from_body(cls, body: Any) -> "UserCreate":
        return cls.model_validate(_as_object(body))

    def is_complete(self) -> bool:
        """name and email must be truthy; age only has to be present (0 and null pass)."""
        return _truthy(self.name) and _truthy(self.email) and "age" in self.model_fields_set


class UserUpdate(BaseModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    age: Optional[Any] = None

    @classmethod
    def from_body(cls, body: Any) -> "UserUpdate":
        return cls.model_validate(_as_object(body))

    def changes(self) -> dict:
        """Fields the client actually sent, explicit nulls included."""
        return self.model_dump(exclude_unset=True)
