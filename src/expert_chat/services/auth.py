"""Authentication client for the backend API."""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from expert_chat.core.config import settings
from expert_chat.core.exceptions import ApiError, ClientException, ServiceError
from expert_chat.models import AuthResult, RegisterRequest, dump_payload
from expert_chat.services.api_client import ApiClient
from expert_chat.services.base import AuthService, Payload
from expert_chat.services.error_handler import ErrorHandler
from expert_chat.storage.base import TokenStore

logger = structlog.get_logger()

DEFAULT_BASE_URL = "http://localhost:3000"

# Statuses meaning the stored session is no longer valid
SESSION_INVALID_STATUSES = frozenset({401, 403})


class ApiAuthClient(AuthService):
    """AuthService backed by the REST API.

    Requests carry session cookies as well as the bearer token. Every
    successful sign-in, registration or refresh replaces the token held by the
    token store.
    """

    def __init__(
        self,
        token_store: TokenStore,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token_store = token_store
        self.api = ApiClient(
            base_url or settings.api_base_url or DEFAULT_BASE_URL,
            token_store,
            with_credentials=True,
            transport=transport,
        )

    async def _authenticate(self, endpoint: str, body: dict[str, Any] | None = None) -> Payload:
        """Call a token-issuing endpoint, store the token and return the user."""
        try:
            data = await self.api.request(endpoint, method="POST", body=body)
            result = AuthResult.model_validate(data)
        except (ClientException, ValidationError) as e:
            raise ServiceError(ErrorHandler.handle(e)) from e

        self.token_store.set_token(result.token)
        return result.user

    async def login(self, username: str, password: str) -> Payload:
        user = await self._authenticate(
            "/auth/login",
            {"username": username, "password": password},
        )
        logger.info("Logged in", username=username)
        return user

    async def register(self, user_data: RegisterRequest | Payload) -> Payload:
        return await self._authenticate("/auth/register", dump_payload(user_data))

    async def logout(self) -> None:
        try:
            await self.api.request("/auth/logout", method="POST")
        except ClientException as e:
            logger.warning(
                "Backend logout failed, proceeding with local logout",
                error=ErrorHandler.handle(e),
            )
        finally:
            self.token_store.clear_token()

    async def refresh_token(self) -> Payload:
        return await self._authenticate("/auth/refresh")

    async def get_current_user(self) -> Payload | None:
        try:
            return await self.api.request("/auth/me", method="GET")
        except ApiError as e:
            if e.status in SESSION_INVALID_STATUSES:
                logger.info("Session no longer valid, clearing token", status=e.status)
                self.token_store.clear_token()
                return None
            raise ServiceError(ErrorHandler.handle(e)) from e
        except ClientException as e:
            raise ServiceError(ErrorHandler.handle(e)) from e

    async def aclose(self) -> None:
        await self.api.aclose()
