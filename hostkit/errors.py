"""
Error types shared by the registry and the sequencer.

Programmer errors (bad partition, bad argument, unknown sequence, bad
display target) are raised. Store failures are caught inside the
registry and reported through RegistryResult instead.
"""

from __future__ import annotations

from typing import Optional


class HostKitError(Exception):
    """Base class for hostkit errors."""


class InvalidPartition(HostKitError, ValueError):
    """Partition name is not one of the fixed partitions."""

    def __init__(self, partition: object):
        super().__init__(f"Unknown partition: {partition!r}")
        self.partition = partition


class InvalidArgument(HostKitError, ValueError):
    """Argument has the wrong type or shape for the operation."""


class CloneLimitExceeded(InvalidArgument):
    """Data is nested too deeply or holds too many items to clone."""


class StoreFailure(HostKitError):
    """An external store call failed."""

    def __init__(self, operation: str, key: str, cause: Optional[BaseException] = None):
        detail = f"{operation} {key!r} failed"
        if cause is not None:
            detail = f"{detail}: {cause}"
        super().__init__(detail)
        self.operation = operation
        self.key = key
        self.cause = cause


class MissingSequence(HostKitError, KeyError):
    """No dialogue sequence with the requested key."""

    def __init__(self, key: str):
        super().__init__(f"No dialogue sequence named {key!r}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidDisplayTarget(HostKitError, TypeError):
    """Display target does not support text, visibility and opacity."""
