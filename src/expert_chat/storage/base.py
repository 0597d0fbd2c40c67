"""Abstract base class for token storage backends."""

from abc import ABC, abstractmethod


class TokenStore(ABC):
    """Holds the bearer token shared by the API clients.

    Reads and writes are assumed atomic; callers do not coordinate access.
    """

    @abstractmethod
    def get_token(self) -> str | None:
        """Get the stored token, or None when signed out."""
        ...

    @abstractmethod
    def set_token(self, token: str) -> None:
        """Store a new token, replacing any previous one."""
        ...

    @abstractmethod
    def clear_token(self) -> None:
        """Forget the stored token."""
        ...

    def has_token(self) -> bool:
        """Check whether a token is currently stored."""
        return bool(self.get_token())
