"""
In-process key-value store.
"""

from __future__ import annotations

import copy
from typing import Any, Iterator

from hostengine.store.base import KeyValueStore


class MemoryStore(KeyValueStore):
    """
    Dict-backed store for tests and offline hosts.

    Values are deep-copied in and out so nothing outside the store can
    alias stored data.
    """

    def __init__(self):
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
