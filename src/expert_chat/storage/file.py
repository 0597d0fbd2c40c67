"""File-backed token storage."""

import json
from pathlib import Path

import structlog

from expert_chat.storage.base import TokenStore

logger = structlog.get_logger()


class FileTokenStore(TokenStore):
    """Token store persisted to a small JSON file.

    Keeps the session across process restarts. An unreadable or malformed
    file is treated as "no token".
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_token(self) -> str | None:
        if not self.path.exists():
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read token file", path=str(self.path), error=str(e))
            return None

        token = data.get("token") if isinstance(data, dict) else None
        return token if isinstance(token, str) and token else None

    def set_token(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"token": token}), encoding="utf-8")
        # Owner-only; the file holds a credential
        self.path.chmod(0o600)

    def clear_token(self) -> None:
        self.path.unlink(missing_ok=True)
