"""Core module - configuration, exceptions and logging."""

from expert_chat.core.config import Settings, get_settings, settings
from expert_chat.core.exceptions import (
    ApiError,
    ClientException,
    ConfigurationError,
    NotSupportedError,
    ServiceError,
    TransportError,
)
from expert_chat.core.logging_setup import configure_logging

__all__ = [
    "settings",
    "Settings",
    "get_settings",
    "configure_logging",
    "ClientException",
    "ConfigurationError",
    "TransportError",
    "ApiError",
    "NotSupportedError",
    "ServiceError",
]
