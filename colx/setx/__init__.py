"""
Public API for the set containers.
"""

from __future__ import annotations

from colx.mapx import Backend

from .map_set import UNIT, ArraySet, HashSet, LinkedSet, MapSet
from .types import Set


_BACKENDS: dict[Backend, type[MapSet]] = {
    Backend.HASH: HashSet,
    Backend.ARRAY: ArraySet,
    Backend.LINKED: LinkedSet,
}


def new_set(backend: Backend | str = Backend.HASH) -> MapSet:
    """Create an empty set of the requested backend."""
    return _BACKENDS[Backend.parse(backend)]()


__all__ = [
    "UNIT",
    "ArraySet",
    "Backend",
    "HashSet",
    "LinkedSet",
    "MapSet",
    "Set",
    "new_set",
]
