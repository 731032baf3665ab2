"""
Registry module - per-user persistence over fixed partitions.

Provides:
- Registry: get/save/append/delete/reset/exists, log and comment
- Partition: the fixed set of record categories
- RegistryResult: (ok, error) outcome of a write
- structural_clone: bounded deep copy of JSON-like data
"""

from hostkit.registry.partitions import Partition
from hostkit.registry.clone import structural_clone, is_container
from hostkit.registry.manager import Registry, RegistryResult

__all__ = [
    "Registry",
    "RegistryResult",
    "Partition",
    "structural_clone",
    "is_container",
]
