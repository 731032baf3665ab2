"""
Store module - key-value persistence backends.

Provides:
- KeyValueStore: get/set/delete boundary used by the registry
- MemoryStore: in-process backend
- JsonFileStore: one checksummed JSON file per key
"""

from hostengine.store.base import KeyValueStore, StoreError
from hostengine.store.memory import MemoryStore
from hostengine.store.json_file import JsonFileStore

__all__ = [
    "KeyValueStore",
    "StoreError",
    "MemoryStore",
    "JsonFileStore",
]
