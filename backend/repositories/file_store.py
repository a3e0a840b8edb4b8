"""
File-based implementation of StoreProtocol.
The whole user collection lives in one pretty-printed JSON array.

Every call re-reads or rewrites the full document. There is no lock and no
temp-file rename: concurrent writers can lose updates and a crash mid-write
can truncate the file.
"""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Store states reported by FileStore.check()
STORE_OK = "ok"
STORE_MISSING = "missing"
STORE_UNREADABLE = "unreadable"
STORE_CORRUPT = "corrupt"


class FileStore:
    """JSON-document persistence for user records."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> tuple[Optional[list], str, str]:
        """Return (users or None, state, reason)."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None, STORE_MISSING, "file not found"
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return None, STORE_CORRUPT, str(e)
        except OSError as e:
            return None, STORE_UNREADABLE, str(e)
        if not isinstance(data, list):
            return None, STORE_CORRUPT, f"top level is {type(data).__name__}, not an array"
        return data, STORE_OK, ""

    def read(self) -> list[dict]:
        """Return the stored users, or [] if the document is missing or unreadable."""
        users, state, reason = self._load()
        if state == STORE_MISSING:
            logger.debug("Users file %s not found, starting empty", self.path)
        elif state != STORE_OK:
            logger.warning("Users file %s is %s (%s), treating as empty", self.path, state, reason)
        return users if users is not None else []

    def write(self, users: list[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(users, f, ensure_ascii=False, indent=2)

    def check(self) -> dict:
        """Describe the document's state for operators; API callers only ever see read()."""
        users, state, reason = self._load()
        return {
            "path": str(self.path),
            "state": state,
            "detail": reason or None,
            "count": len(users) if users is not None else 0,
        }
