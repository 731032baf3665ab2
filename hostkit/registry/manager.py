"""
Registry - per-user records filed under fixed partitions.

Provides:
- get/save/append/delete/reset/exists over a KeyValueStore
- log/comment helpers that append time-stamped entries
- One store call per step, no retries; failures are logged and
  returned as RegistryResult(False, detail)

Writes are read-modify-write on a single key with no locking, so two
writers racing on the same (partition, user) pair end with the last
write winning.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, NamedTuple, Optional

from hostengine.core.events import EventBus, RegistryEvent
from hostengine.store import KeyValueStore, MemoryStore, JsonFileStore
from hostkit.config import RegistryConfig
from hostkit.errors import InvalidArgument, StoreFailure
from hostkit.registry.clone import is_container, structural_clone
from hostkit.registry.partitions import Partition


class RegistryResult(NamedTuple):
    """Outcome of a registry write. Truthy when the write applied."""
    ok: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


_OK = RegistryResult(True, None)

Selector = int | str


class Registry:
    """
    CRUD access to user records.

    Usage:
        registry = Registry(MemoryStore())
        registry.save(user_id, "Settings", {"music": 0.8})
        ok, error = registry.append(user_id, Partition.INVENTORY, {"item": "potion"})
        if not ok:
            ...
        registry.log(user_id, "Opened the shop")
    """

    def __init__(
        self,
        store: KeyValueStore,
        config: Optional[RegistryConfig] = None,
        event_bus: Optional[EventBus] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.config = config or RegistryConfig()
        self.event_bus = event_bus
        self._clock = clock
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        config: RegistryConfig,
        event_bus: Optional[EventBus] = None,
    ) -> 'Registry':
        """Build a registry with the store the config asks for."""
        if config.store_path:
            store: KeyValueStore = JsonFileStore(config.store_path)
        else:
            store = MemoryStore()
        return cls(store, config=config, event_bus=event_bus)

    def key_for(self, user_id: Any, partition: Partition | str) -> str:
        """Store key for a user's record in a partition."""
        part = Partition.resolve(partition)
        return self.config.key_format.format(partition=part.value, user_id=user_id)

    # Reads

    def get(self, user_id: Any, partition: Partition | str) -> Any:
        """
        Fetch a user's record.

        Returns:
            The stored container, or an empty one if nothing is stored or
            the store call failed
        """
        part = Partition.resolve(partition)
        key = self.key_for(user_id, part)

        try:
            record = self.store.get(key)
        except Exception as e:
            self._report_failure(StoreFailure("get", key, e))
            return part.empty()

        if record is None:
            return part.empty()
        return record

    def exists(self, user_id: Any, partition: Partition | str) -> bool:
        """True if a non-empty record is stored."""
        record = self.get(user_id, partition)
        return is_container(record) and len(record) > 0

    # Writes

    def save(self, user_id: Any, partition: Partition | str, record: Any) -> RegistryResult:
        """
        Overwrite a user's record.

        Raises:
            InvalidArgument: if record is not a dict or list
        """
        part = Partition.resolve(partition)
        if not is_container(record):
            raise InvalidArgument(
                f"save needs a dict or list, got {type(record).__name__}"
            )

        data = self._clone(record)
        return self._write(self.key_for(user_id, part), data)

    def append(self, user_id: Any, partition: Partition | str, item: Any) -> RegistryResult:
        """
        Append a copy of item to a user's list record.

        Later changes to item do not reach the stored copy. A missing
        record starts as the partition's empty container, so appending to
        a mapping partition fails whether or not a record is stored.
        """
        part = Partition.resolve(partition)
        key = self.key_for(user_id, part)
        entry = self._clone(item)

        try:
            record = self.store.get(key)
        except Exception as e:
            return self._report_failure(StoreFailure("get", key, e))

        if record is None:
            record = part.empty()
        if not isinstance(record, list):
            detail = f"Record at {key!r} is a {type(record).__name__}, cannot append"
            self.logger.warning(detail)
            return RegistryResult(False, detail)

        record.append(entry)
        return self._write(key, record)

    def delete(
        self,
        user_id: Any,
        partition: Partition | str,
        index_or_key: Selector,
    ) -> RegistryResult:
        """
        Remove one element from a user's record.

        An int removes the list element at that zero-based position; a str
        removes that mapping key. Selectors that match nothing leave the
        record untouched and still succeed.

        Raises:
            InvalidArgument: if the selector is neither int nor str
        """
        part = Partition.resolve(partition)
        if isinstance(index_or_key, bool) or not isinstance(index_or_key, (int, str)):
            raise InvalidArgument(
                f"delete needs an int position or str key, got {index_or_key!r}"
            )

        key = self.key_for(user_id, part)
        try:
            record = self.store.get(key)
        except Exception as e:
            return self._report_failure(StoreFailure("get", key, e))

        if isinstance(record, list) and isinstance(index_or_key, int):
            if not 0 <= index_or_key < len(record):
                return _OK
            del record[index_or_key]
        elif isinstance(record, dict) and isinstance(index_or_key, str):
            if index_or_key not in record:
                return _OK
            del record[index_or_key]
        else:
            return _OK

        return self._write(key, record)

    def reset(self, user_id: Any, partition: Partition | str) -> RegistryResult:
        """Remove a user's record entirely."""
        key = self.key_for(user_id, partition)

        try:
            self.store.delete(key)
        except Exception as e:
            return self._report_failure(StoreFailure("delete", key, e))

        if self.event_bus:
            self.event_bus.publish(RegistryEvent.RECORD_RESET, key=key)
        return _OK

    # Convenience

    def log(self, user_id: Any, message: str) -> RegistryResult:
        """Append a time-stamped message to the user's log."""
        return self.append(user_id, Partition.LOGS, {
            'time': self._timestamp(),
            'message': message,
        })

    def comment(self, user_id: Any, text: str, origin: str) -> RegistryResult:
        """Append a time-stamped comment, noting where it came from."""
        return self.append(user_id, Partition.COMMENTS, {
            'time': self._timestamp(),
            'text': text,
            'origin': origin,
        })

    # Internals

    def _clone(self, value: Any) -> Any:
        return structural_clone(
            value,
            max_depth=self.config.clone_max_depth,
            max_items=self.config.clone_max_items,
        )

    def _timestamp(self) -> str:
        return self._clock().isoformat()

    def _write(self, key: str, record: Any) -> RegistryResult:
        try:
            self.store.set(key, record)
        except Exception as e:
            return self._report_failure(StoreFailure("set", key, e))

        if self.event_bus:
            self.event_bus.publish(RegistryEvent.RECORD_WRITTEN, key=key)
        return _OK

    def _report_failure(self, failure: StoreFailure) -> RegistryResult:
        self.logger.error(f"Registry store call failed: {failure}")
        if self.event_bus:
            self.event_bus.publish(
                RegistryEvent.STORE_FAILED,
                key=failure.key,
                operation=failure.operation,
                error=str(failure),
            )
        return RegistryResult(False, str(failure))
