"""
Users API configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_USERS_FILE = "app/users/users.json"
DEFAULT_PORT = 8000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Users API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL

    # Server (used by `python main.py`)
    HOST: str = DEFAULT_HOST
    PORT: int = DEFAULT_PORT

    # Storage: one JSON document holding the whole collection, relative to cwd
    USERS_FILE: Path

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "*")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        self.HOST = (os.environ.get("HOST") or DEFAULT_HOST).strip()
        try:
            self.PORT = int(os.environ.get("PORT") or DEFAULT_PORT)
        except ValueError:
            self.PORT = DEFAULT_PORT
        users_file = (os.environ.get("USERS_FILE") or DEFAULT_USERS_FILE).strip()
        self.USERS_FILE = Path(users_file)
