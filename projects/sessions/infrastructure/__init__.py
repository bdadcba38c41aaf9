"""Session infrastructure (key-value stores and AuthManager)."""
from projects.sessions.infrastructure.auth_manager import AuthManager
from projects.sessions.infrastructure.key_value_store import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
)

__all__ = [
    "AuthManager",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
