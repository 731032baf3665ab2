"""
hostengine - low-level host services.

Subpackages:
- core: Event bus and delay schedulers
- store: Key-value store backends
- ui: Text label display target and renderer
"""

__version__ = "0.1.0"
