"""
hostkit - game host scripts.

Modules:
- registry: Per-user records over fixed partitions
- sequencer: Timed dialogue playback with text effects
- config: Frozen configuration models
- errors: Error types
"""

from hostkit.config import HostConfig, RegistryConfig, SequencerConfig, configure_logging
from hostkit.errors import (
    HostKitError,
    InvalidPartition,
    InvalidArgument,
    CloneLimitExceeded,
    StoreFailure,
    MissingSequence,
    InvalidDisplayTarget,
)
from hostkit.registry import Registry, RegistryResult, Partition
from hostkit.sequencer import Sequencer, PlaybackSession, CancellationToken, DialogueCatalog

__version__ = "0.1.0"

__all__ = [
    # Config
    "HostConfig",
    "RegistryConfig",
    "SequencerConfig",
    "configure_logging",
    # Errors
    "HostKitError",
    "InvalidPartition",
    "InvalidArgument",
    "CloneLimitExceeded",
    "StoreFailure",
    "MissingSequence",
    "InvalidDisplayTarget",
    # Registry
    "Registry",
    "RegistryResult",
    "Partition",
    # Sequencer
    "Sequencer",
    "PlaybackSession",
    "CancellationToken",
    "DialogueCatalog",
]
