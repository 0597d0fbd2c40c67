"""Async client for the expert chat backend API."""

from expert_chat.core.exceptions import (
    ApiError,
    ClientException,
    NotSupportedError,
    ServiceError,
    TransportError,
)
from expert_chat.factory import ExpertChatClients, build_clients
from expert_chat.services import (
    ApiAuthClient,
    ApiChatClient,
    ApiClient,
    AuthService,
    ChatService,
    ErrorHandler,
)
from expert_chat.storage import FileTokenStore, InMemoryTokenStore, TokenStore

__version__ = "0.1.0"

__all__ = [
    "build_clients",
    "ExpertChatClients",
    # Services
    "ApiClient",
    "ApiAuthClient",
    "ApiChatClient",
    "AuthService",
    "ChatService",
    "ErrorHandler",
    # Storage
    "TokenStore",
    "InMemoryTokenStore",
    "FileTokenStore",
    # Errors
    "ClientException",
    "TransportError",
    "ApiError",
    "NotSupportedError",
    "ServiceError",
]
