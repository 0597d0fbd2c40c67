"""Conversation, message and expert workflow client for the backend API."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from expert_chat.core.config import settings
from expert_chat.core.exceptions import ClientException, NotSupportedError, ServiceError
from expert_chat.models import (
    CreateConversationRequest,
    SendMessageRequest,
    UpdateConversationRequest,
    UpdateExpertProfileRequest,
    dump_payload,
)
from expert_chat.services.api_client import ApiClient
from expert_chat.services.base import ChatService, Payload
from expert_chat.services.error_handler import ErrorHandler
from expert_chat.storage.base import TokenStore

logger = structlog.get_logger()


def _segment(value: str) -> str:
    """Percent-encode a value used as a single path segment."""
    return quote(str(value), safe="")


class ApiChatClient(ChatService):
    """ChatService backed by the REST API.

    Requests are authenticated with the bearer token only. Response payloads
    are returned unchanged.
    """

    def __init__(
        self,
        token_store: TokenStore,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token_store = token_store
        self.api = ApiClient(
            base_url if base_url is not None else settings.api_base_url,
            token_store,
            with_credentials=False,
            transport=transport,
        )

    async def _call(self, endpoint: str, method: str = "GET", body: Any = None) -> Any:
        """Run one request, normalizing any failure into a ServiceError."""
        try:
            return await self.api.request(endpoint, method=method, body=body)
        except ClientException as e:
            raise ServiceError(ErrorHandler.handle(e)) from e

    # ==================== Conversations ====================

    async def get_conversations(self) -> list[Payload]:
        return await self._call("/conversations")

    async def get_conversation(self, conversation_id: str) -> Payload:
        return await self._call(f"/conversations/{_segment(conversation_id)}")

    async def create_conversation(
        self,
        request: CreateConversationRequest | Payload,
    ) -> Payload:
        return await self._call("/conversations", method="POST", body=dump_payload(request))

    async def update_conversation(
        self,
        conversation_id: str,
        request: UpdateConversationRequest | Payload,
    ) -> Payload:
        # Not used by the application
        raise NotSupportedError("update_conversation")

    async def delete_conversation(self, conversation_id: str) -> None:
        # Not used by the application
        raise NotSupportedError("delete_conversation")

    # ==================== Messages ====================

    async def get_messages(self, conversation_id: str) -> list[Payload]:
        return await self._call(f"/conversations/{_segment(conversation_id)}/messages")

    async def send_message(self, request: SendMessageRequest | Payload) -> Payload:
        return await self._call("/messages", method="POST", body=dump_payload(request))

    async def mark_message_as_read(self, message_id: str) -> None:
        # Not used by the application
        raise NotSupportedError("mark_message_as_read")

    # ==================== Expert Workflow ====================

    async def get_expert_queue(self) -> Payload:
        return await self._call("/expert/queue")

    async def claim_conversation(self, conversation_id: str) -> None:
        await self._call(
            f"/expert/conversations/{_segment(conversation_id)}/claim",
            method="POST",
        )
        logger.info("Claimed conversation", conversation_id=conversation_id)

    async def unclaim_conversation(self, conversation_id: str) -> None:
        await self._call(
            f"/expert/conversations/{_segment(conversation_id)}/unclaim",
            method="POST",
        )
        logger.info("Released conversation", conversation_id=conversation_id)

    async def get_expert_profile(self) -> Payload:
        return await self._call("/expert/profile")

    async def update_expert_profile(
        self,
        request: UpdateExpertProfileRequest | Payload,
    ) -> Payload:
        return await self._call("/expert/profile", method="PUT", body=dump_payload(request))

    async def get_expert_assignment_history(self) -> list[Payload]:
        return await self._call("/expert/assignments/history")

    async def aclose(self) -> None:
        await self.api.aclose()
