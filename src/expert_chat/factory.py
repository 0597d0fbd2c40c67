"""Wiring for the auth and chat clients."""

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from expert_chat.core.config import Settings, settings as default_settings
from expert_chat.services.auth import ApiAuthClient
from expert_chat.services.chat import ApiChatClient
from expert_chat.storage import FileTokenStore, InMemoryTokenStore, TokenStore

logger = structlog.get_logger()


@dataclass
class ExpertChatClients:
    """Both API clients, sharing one token store."""

    auth: ApiAuthClient
    chat: ApiChatClient
    token_store: TokenStore

    async def aclose(self) -> None:
        await self.auth.aclose()
        await self.chat.aclose()

    async def __aenter__(self) -> "ExpertChatClients":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_token_store(settings: Settings | None = None) -> TokenStore:
    """Create the token store selected by configuration."""
    settings = settings or default_settings
    if settings.token_file:
        return FileTokenStore(settings.token_file)
    return InMemoryTokenStore()


def build_clients(
    settings: Settings | None = None,
    token_store: TokenStore | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ExpertChatClients:
    """Build the auth and chat clients against the configured backend.

    Args:
        settings: Configuration, defaults to the environment settings
        token_store: Shared token store, defaults to the configured one
        transport: Optional httpx transport for both clients

    Returns:
        ExpertChatClients bundle
    """
    settings = settings or default_settings
    token_store = token_store or create_token_store(settings)

    clients = ExpertChatClients(
        auth=ApiAuthClient(token_store, base_url=settings.api_base_url, transport=transport),
        chat=ApiChatClient(token_store, base_url=settings.api_base_url, transport=transport),
        token_store=token_store,
    )

    logger.debug(
        "API clients initialized",
        base_url=settings.api_base_url,
        token_store=type(token_store).__name__,
    )

    return clients
