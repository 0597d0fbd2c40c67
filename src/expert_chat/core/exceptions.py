"""Custom exceptions for the API clients."""

from typing import Any


class ClientException(Exception):
    """Base exception for client errors."""

    def __init__(
        self,
        message: str,
        code: str = "CLIENT_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ConfigurationError(ClientException):
    """Raised when there's a configuration problem."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class TransportError(ClientException):
    """Raised when the request never produced an HTTP response.

    Covers connection failures, DNS errors and transport timeouts. Carries no
    status code.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(
            message,
            code="NETWORK_ERROR",
            details={"url": url} if url else {},
        )


class ApiError(ClientException):
    """Raised when the backend answers with a non-success status."""

    def __init__(self, message: str, status: int, body: Any = None) -> None:
        super().__init__(
            message,
            code="API_ERROR",
            details={"status": status},
        )
        self.status = status
        self.body = body


class NotSupportedError(ClientException):
    """Raised by operations that are declared but not supported by this client."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"{operation} method not implemented",
            code="NOT_SUPPORTED",
            details={"operation": operation},
        )


class ServiceError(ClientException):
    """Message-only error raised by the public client methods."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="SERVICE_ERROR")
