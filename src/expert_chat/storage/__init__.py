"""Token storage - in-memory and file implementations."""

from expert_chat.storage.base import TokenStore
from expert_chat.storage.file import FileTokenStore
from expert_chat.storage.memory import InMemoryTokenStore

__all__ = ["TokenStore", "InMemoryTokenStore", "FileTokenStore"]
