"""
Ordered map/set engine with interchangeable backends.
"""

from __future__ import annotations

from .lru import LRUCache, LRUSet
from .mapx import ArrayMap, Backend, Entry, HashMap, LinkedMap, Map, Reorderable, new_map
from .setx import ArraySet, HashSet, LinkedSet, MapSet, Set, new_set


__all__ = [
    "ArrayMap",
    "ArraySet",
    "Backend",
    "Entry",
    "HashMap",
    "HashSet",
    "LRUCache",
    "LRUSet",
    "LinkedMap",
    "LinkedSet",
    "Map",
    "MapSet",
    "Reorderable",
    "Set",
    "new_map",
    "new_set",
]
