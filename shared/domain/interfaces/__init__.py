"""Domain interfaces for Clean Architecture."""
from .key_value_store import KeyValueStore
from .session_store import SessionStore

__all__ = [
    "KeyValueStore",
    "SessionStore",
]
