"""
Set adapter over any Map backend.

Elements are stored as keys of the embedded map with a unit value, so the
set inherits the backend's ordering and complexity. Reordering is reached
through Map.as_reorderable() instead of a type check on the backend.
"""

from __future__ import annotations

from typing import Self

from colx.mapx import ArrayMap, HashMap, LinkedMap, Map
from colx.setx.types import Set, T


# value stored for every element; carries no information
UNIT = None


class MapSet(Set[T]):
    __slots__ = ("_data",)

    def __init__(self, data: Map[T, None] | None = None) -> None:
        self._data: Map[T, None] = data if data is not None else HashMap()

    def add(self, t: T) -> Self:
        self._data.put(t, UNIT)
        return self

    def remove(self, t: T) -> Self:
        self._data.delete(t)
        return self

    def contains(self, t: T) -> bool:
        _, found = self._data.get(t)
        return found

    def elems(self) -> list[T]:
        return self._data.keys()

    def clear(self) -> Self:
        self._data.clear()
        return self

    def size(self) -> int:
        return self._data.size()

    @property
    def reorderable(self) -> bool:
        return self._data.as_reorderable() is not None

    def move_to_end(self, t: T) -> bool:
        """Move t to the newest position. False if absent or unsupported."""
        reorder = self._data.as_reorderable()
        if reorder is None:
            return False
        return reorder.move_to_end(t)

    def move_to_front(self, t: T) -> bool:
        """Move t to the oldest position. False if absent or unsupported."""
        reorder = self._data.as_reorderable()
        if reorder is None:
            return False
        return reorder.move_to_front(t)


class HashSet(MapSet[T]):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(HashMap())


class ArraySet(MapSet[T]):
    """Insertion-ordered set for small element counts (linear membership)."""

    __slots__ = ("_array",)

    def __init__(self) -> None:
        self._array: ArrayMap[T, None] = ArrayMap()
        super().__init__(self._array)

    def first(self) -> tuple[T | None, bool]:
        k, _, ok = self._array.first()
        return k, ok

    def last(self) -> tuple[T | None, bool]:
        k, _, ok = self._array.last()
        return k, ok


class LinkedSet(MapSet[T]):
    """Insertion-ordered set with O(1) membership and O(1) reordering."""

    __slots__ = ("_linked",)

    def __init__(self) -> None:
        self._linked: LinkedMap[T, None] = LinkedMap()
        super().__init__(self._linked)

    def move_to_end(self, t: T) -> bool:
        return self._linked.move_to_end(t)

    def move_to_front(self, t: T) -> bool:
        return self._linked.move_to_front(t)

    def first(self) -> tuple[T | None, bool]:
        k, _, ok = self._linked.first()
        return k, ok

    def last(self) -> tuple[T | None, bool]:
        k, _, ok = self._linked.last()
        return k, ok
