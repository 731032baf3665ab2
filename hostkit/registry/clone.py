"""
Bounded structural clone of JSON-like data.
"""

from __future__ import annotations

from typing import Any

from hostkit.errors import CloneLimitExceeded, InvalidArgument


SCALAR_TYPES = (str, int, float, bool, type(None))


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list, tuple))


def structural_clone(value: Any, max_depth: int = 64, max_items: int = 10_000) -> Any:
    """
    Deep-copy dicts, lists and scalars.

    Tuples come back as lists. Dict keys must be strings. Cyclic data
    runs into the depth limit.

    Args:
        value: Data to copy
        max_depth: Deepest container nesting allowed
        max_items: Total container entries allowed across the whole value

    Raises:
        CloneLimitExceeded: if either bound is hit
        InvalidArgument: for values that are not JSON-like
    """
    budget = [max_items]

    def _clone(node: Any, depth: int) -> Any:
        if isinstance(node, SCALAR_TYPES):
            return node

        if depth >= max_depth:
            raise CloneLimitExceeded(f"Data nested deeper than {max_depth} levels")

        if isinstance(node, dict):
            _spend(len(node))
            result = {}
            for key, item in node.items():
                if not isinstance(key, str):
                    raise InvalidArgument(f"Mapping keys must be strings, got {key!r}")
                result[key] = _clone(item, depth + 1)
            return result

        if isinstance(node, (list, tuple)):
            _spend(len(node))
            return [_clone(item, depth + 1) for item in node]

        raise InvalidArgument(f"Cannot store value of type {type(node).__name__}")

    def _spend(count: int) -> None:
        budget[0] -= count
        if budget[0] < 0:
            raise CloneLimitExceeded(f"Data holds more than {max_items} items")

    return _clone(value, 0)
