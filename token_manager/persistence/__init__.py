"""
Persistence module - JSON-based data storage

Provides:
- JSONStore: Base class for JSON file handling
- TokenStore: Token table load/save
"""

from .json_store import JSONStore, JSONStoreError, JSONStoreFormatError, JSONStoreIOError
from .token_store import TokenStore

__all__ = [
    "JSONStore",
    "JSONStoreError",
    "JSONStoreFormatError",
    "JSONStoreIOError",
    "TokenStore",
]
