"""Message models."""

from datetime import datetime

from expert_chat.models.common import ApiModel


class Message(ApiModel):
    """A single chat message."""

    id: str
    conversation_id: str
    sender_id: str | None = None
    sender_type: str | None = None  # user or expert
    content: str
    message_type: str = "text"
    timestamp: datetime | None = None
    is_read: bool = False


class SendMessageRequest(ApiModel):
    conversation_id: str
    content: str
    message_type: str = "text"
