"""Expert workflow models."""

from datetime import datetime

from pydantic import Field

from expert_chat.models.common import ApiModel
from expert_chat.models.conversation import Conversation


class ExpertQueue(ApiModel):
    """Snapshot of waiting and assigned work for the current expert."""

    waiting_conversations: list[Conversation] = Field(default_factory=list)
    assigned_conversations: list[Conversation] = Field(default_factory=list)


class ExpertProfile(ApiModel):
    """The expert's own settings."""

    id: str
    user_id: str | None = None
    name: str | None = None
    bio: str | None = None
    knowledge_base_links: list[str] = Field(default_factory=list)
    is_available: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ExpertAssignment(ApiModel):
    """Historical claim record."""

    id: str
    conversation_id: str
    expert_id: str | None = None
    status: str | None = None
    assigned_at: datetime | None = None
    resolved_at: datetime | None = None
    rating: int | None = None


class UpdateExpertProfileRequest(ApiModel):
    name: str | None = None
    bio: str | None = None
    knowledge_base_links: list[str] | None = None
    is_available: bool | None = None
