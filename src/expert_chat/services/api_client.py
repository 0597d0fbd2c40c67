"""Shared request pipeline for the backend REST API."""

from typing import Any

import httpx
import structlog

from expert_chat.core.exceptions import ApiError, ConfigurationError, TransportError
from expert_chat.storage.base import TokenStore

logger = structlog.get_logger()

JSON_CONTENT_TYPE = "application/json"
DEFAULT_ERROR_MESSAGE = "Request failed"


class ApiClient:
    """Builds, sends and decodes requests against one backend.

    Handles:
    - Joining endpoints onto the base URL
    - JSON content type and bearer token headers
    - Decoding JSON or text bodies
    - Raising ApiError for non-success statuses and TransportError when no
      usable response was received

    Two credential modes are supported. With ``with_credentials`` the cookie
    jar is kept between requests (session cookie transport); without it every
    request goes out with the bearer token only.
    """

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        with_credentials: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ConfigurationError("API base URL is not configured")

        self.base_url = base_url.rstrip("/")
        self.token_store = token_store
        self.with_credentials = with_credentials

        self._client = httpx.AsyncClient(transport=transport)

    def build_url(self, endpoint: str) -> str:
        """Join an endpoint onto the base URL with exactly one slash."""
        path = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        return f"{self.base_url}{path}"

    def build_headers(self, headers: dict[str, str] | None = None) -> httpx.Headers:
        """Assemble request headers.

        Caller headers override the JSON content type. The bearer token is only
        added when the caller did not supply an Authorization header.
        """
        merged = httpx.Headers({"Content-Type": JSON_CONTENT_TYPE})
        merged.update(headers or {})

        token = self.token_store.get_token()
        if token and "authorization" not in merged:
            merged["Authorization"] = f"Bearer {token}"

        return merged

    @staticmethod
    def extract_error_message(reason_phrase: str, body: Any) -> str:
        """Derive an error message from a failed response.

        Prefers the body's ``error`` string, then its joined ``errors`` list,
        then the HTTP reason phrase.
        """
        fallback = reason_phrase or DEFAULT_ERROR_MESSAGE
        if not isinstance(body, dict):
            return fallback

        error = body.get("error")
        if isinstance(error, str) and error:
            return error

        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(e) for e in errors)

        return fallback

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded response body.

        Args:
            endpoint: Path relative to the base URL
            method: HTTP method
            body: JSON-serializable request body, if any
            headers: Extra headers

        Returns:
            Parsed JSON, response text, or None when the body could not be read

        Raises:
            TransportError: No usable response was received
            ApiError: The response status was not 2xx
        """
        url = self.build_url(endpoint)
        request_headers = self.build_headers(headers)

        if not self.with_credentials:
            self._client.cookies.clear()

        try:
            response = await self._client.request(
                method,
                url,
                json=body,
                headers=request_headers,
            )
        except httpx.RequestError as e:
            # Connection, timeout and content-decoding failures; none carry a status
            reason = str(e) or e.__class__.__name__
            logger.error("Network error while fetching", method=method, url=url, error=reason)
            raise TransportError(f"Network request failed: {reason}", url=url) from e

        data = self._parse_body(response, url)

        if not response.is_success:
            message = self.extract_error_message(response.reason_phrase, data)
            logger.debug(
                "Request failed",
                method=method,
                url=url,
                status=response.status_code,
                error=message,
            )
            raise ApiError(message, status=response.status_code, body=data)

        return data

    def _parse_body(self, response: httpx.Response, url: str) -> Any:
        """Decode the body according to its declared content type."""
        content_type = response.headers.get("content-type", "")

        if JSON_CONTENT_TYPE in content_type:
            try:
                return response.json()
            except ValueError as e:
                logger.warning("Failed to parse JSON body", url=url, error=str(e))
                return None

        # Undecodable bytes are replaced, so reading text never fails
        return response.text

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
