"""Request and response models for the backend API."""

from expert_chat.models.auth import AuthResult, RegisterRequest, User
from expert_chat.models.common import ApiModel, dump_payload
from expert_chat.models.conversation import (
    Conversation,
    CreateConversationRequest,
    UpdateConversationRequest,
)
from expert_chat.models.expert import (
    ExpertAssignment,
    ExpertProfile,
    ExpertQueue,
    UpdateExpertProfileRequest,
)
from expert_chat.models.message import Message, SendMessageRequest

__all__ = [
    "ApiModel",
    "dump_payload",
    # Auth
    "User",
    "AuthResult",
    "RegisterRequest",
    # Conversation
    "Conversation",
    "CreateConversationRequest",
    "UpdateConversationRequest",
    # Message
    "Message",
    "SendMessageRequest",
    # Expert
    "ExpertQueue",
    "ExpertProfile",
    "ExpertAssignment",
    "UpdateExpertProfileRequest",
]
