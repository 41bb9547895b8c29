"""
Public API for the map backends.
"""

from __future__ import annotations

from .array_map import ArrayMap
from .backend import Backend
from .hash_map import HashMap
from .linked_map import LinkedMap
from .types import Entry, Map, Node, Reorderable


_BACKENDS: dict[Backend, type[Map]] = {
    Backend.HASH: HashMap,
    Backend.ARRAY: ArrayMap,
    Backend.LINKED: LinkedMap,
}


def new_map(backend: Backend | str = Backend.HASH) -> Map:
    """Create an empty map of the requested backend."""
    return _BACKENDS[Backend.parse(backend)]()


__all__ = [
    "ArrayMap",
    "Backend",
    "Entry",
    "HashMap",
    "LinkedMap",
    "Map",
    "Node",
    "Reorderable",
    "new_map",
]
