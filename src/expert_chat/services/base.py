"""Abstract service interfaces consumed by the application."""

from abc import ABC, abstractmethod
from typing import Any

from expert_chat.models import (
    CreateConversationRequest,
    RegisterRequest,
    SendMessageRequest,
    UpdateConversationRequest,
    UpdateExpertProfileRequest,
)

Payload = dict[str, Any]


class AuthService(ABC):
    """Authentication operations.

    User payloads are returned exactly as the backend sent them.
    """

    @abstractmethod
    async def login(self, username: str, password: str) -> Payload:
        """Sign in and store the issued token."""
        ...

    @abstractmethod
    async def register(self, user_data: RegisterRequest | Payload) -> Payload:
        """Create an account and store the issued token."""
        ...

    @abstractmethod
    async def logout(self) -> None:
        """End the session. Always clears the local token."""
        ...

    @abstractmethod
    async def refresh_token(self) -> Payload:
        """Exchange the current token for a fresh one."""
        ...

    @abstractmethod
    async def get_current_user(self) -> Payload | None:
        """Get the signed-in user, or None when the session is invalid."""
        ...


class ChatService(ABC):
    """Conversation, message and expert workflow operations."""

    # ==================== Conversations ====================

    @abstractmethod
    async def get_conversations(self) -> list[Payload]:
        ...

    @abstractmethod
    async def get_conversation(self, conversation_id: str) -> Payload:
        ...

    @abstractmethod
    async def create_conversation(
        self,
        request: CreateConversationRequest | Payload,
    ) -> Payload:
        ...

    @abstractmethod
    async def update_conversation(
        self,
        conversation_id: str,
        request: UpdateConversationRequest | Payload,
    ) -> Payload:
        ...

    @abstractmethod
    async def delete_conversation(self, conversation_id: str) -> None:
        ...

    # ==================== Messages ====================

    @abstractmethod
    async def get_messages(self, conversation_id: str) -> list[Payload]:
        ...

    @abstractmethod
    async def send_message(self, request: SendMessageRequest | Payload) -> Payload:
        ...

    @abstractmethod
    async def mark_message_as_read(self, message_id: str) -> None:
        ...

    # ==================== Expert Workflow ====================

    @abstractmethod
    async def get_expert_queue(self) -> Payload:
        """Get waiting and assigned conversations for the current expert."""
        ...

    @abstractmethod
    async def claim_conversation(self, conversation_id: str) -> None:
        ...

    @abstractmethod
    async def unclaim_conversation(self, conversation_id: str) -> None:
        ...

    @abstractmethod
    async def get_expert_profile(self) -> Payload:
        ...

    @abstractmethod
    async def update_expert_profile(
        self,
        request: UpdateExpertProfileRequest | Payload,
    ) -> Payload:
        ...

    @abstractmethod
    async def get_expert_assignment_history(self) -> list[Payload]:
        ...
