"""API services - request pipeline, error handling and clients."""

from expert_chat.services.api_client import ApiClient
from expert_chat.services.auth import ApiAuthClient
from expert_chat.services.base import AuthService, ChatService
from expert_chat.services.chat import ApiChatClient
from expert_chat.services.error_handler import ErrorHandler

__all__ = [
    "ApiClient",
    "ErrorHandler",
    "AuthService",
    "ChatService",
    "ApiAuthClient",
    "ApiChatClient",
]
