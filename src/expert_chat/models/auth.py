"""User and authentication models."""

from typing import Any

from pydantic import Field

from expert_chat.models.common import ApiModel


class User(ApiModel):
    """Authenticated identity as returned by the backend."""

    id: str
    username: str
    email: str | None = None
    role: str | None = None


class RegisterRequest(ApiModel):
    """Payload for creating a new account."""

    username: str
    password: str
    email: str | None = None
    role: str | None = None


class AuthResult(ApiModel):
    """Response of the login, register and refresh endpoints.

    ``user`` is kept as the raw payload so callers receive it unchanged.
    """

    user: dict[str, Any]
    token: str = Field(..., min_length=1)
