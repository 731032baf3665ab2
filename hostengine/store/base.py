"""
Key-value store boundary.

The registry treats the store as a black box with three calls.
Backends raise StoreError for anything that goes wrong.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class StoreError(Exception):
    """Raised by a store backend when a call cannot be completed."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class KeyValueStore(ABC):
    """
    Minimal key-value store.

    Values are JSON-compatible data. get() returns None for a key that
    has never been set or has been deleted.
    """

    @abstractmethod
    def get(self, key: str) -> Any:
        """Fetch the value stored under key, or None."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing anything already there."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Deleting a missing key is not an error."""
