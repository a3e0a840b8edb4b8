"""Shared pytest fixtures: a TestClient bound to a throwaway users file."""

import itertools
import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

MOCK_USERS = [
    {"id": "1", "name": "John Doe", "email": "john@example.com", "age": 30},
    {"id": "2", "name": "Jane Smith", "email": "jane@example.com", "age": 25},
    {"id": "3", "name": "Bob Johnson", "email": "bob@example.com", "age": 35},
]


@pytest.fixture
def users_file(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "users.json"
    monkeypatch.setenv("USERS_FILE", str(path))
    return path


@pytest.fixture
def client(users_file):
    from main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seed(users_file):
    """Write the given users to the store file (defaults to MOCK_USERS)."""
    def _seed(users=None):
        users = MOCK_USERS if users is None else users
        users_file.write_text(json.dumps(users, indent=2), encoding="utf-8")
        return users
    return _seed


@pytest.fixture
def stored(users_file):
    """Read back whatever the API persisted."""
    def _stored():
        return json.loads(users_file.read_text(encoding="utf-8"))
    return _stored


@pytest.fixture
def sequential_ids(monkeypatch):
    """Make generated ids distinct even when creates land in the same millisecond."""
    counter = itertools.count(1000)
    monkeypatch.setattr("api.routes.users.new_user_id", lambda: str(next(counter)))
