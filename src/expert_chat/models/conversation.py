"""Conversation models."""

from datetime import datetime

from pydantic import Field

from expert_chat.models.common import ApiModel


class Conversation(ApiModel):
    """A chat thread."""

    id: str
    title: str | None = None
    description: str | None = None
    status: str | None = None  # e.g. waiting, active, resolved
    participants: list[str] = Field(default_factory=list)
    assigned_expert_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateConversationRequest(ApiModel):
    title: str
    description: str | None = None


class UpdateConversationRequest(ApiModel):
    title: str | None = None
    status: str | None = None
