"""
Fixed registry partitions.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from hostkit.errors import InvalidPartition


class Partition(Enum):
    """Named categories a user's records are filed under."""
    PROFILE = "Profile"
    INVENTORY = "Inventory"
    PROGRESS = "Progress"
    SETTINGS = "Settings"
    LOGS = "Logs"
    COMMENTS = "Comments"

    @property
    def is_sequence(self) -> bool:
        """True if the partition holds a list rather than a mapping."""
        return self in _SEQUENCE_PARTITIONS

    def empty(self) -> Any:
        """Fresh empty container of this partition's kind."""
        return [] if self.is_sequence else {}

    @classmethod
    def resolve(cls, partition: 'Partition | str') -> 'Partition':
        """
        Look up a partition by member or by name.

        Raises:
            InvalidPartition: if the name is not a known partition
        """
        if isinstance(partition, cls):
            return partition
        if isinstance(partition, str):
            try:
                return cls(partition)
            except ValueError:
                pass
        raise InvalidPartition(partition)


_SEQUENCE_PARTITIONS = frozenset({
    Partition.INVENTORY,
    Partition.LOGS,
    Partition.COMMENTS,
})
