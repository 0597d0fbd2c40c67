"""In-memory token storage for scripts and testing."""

from expert_chat.storage.base import TokenStore


class InMemoryTokenStore(TokenStore):
    """Token store that lives as long as the process."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get_token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear_token(self) -> None:
        self._token = None
