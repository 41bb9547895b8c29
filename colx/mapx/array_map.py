from __future__ import annotations

from collections.abc import Callable
from typing import Self

from colx.mapx.types import K, Map, V


class ArrayMap(Map[K, V]):
    """
    Two index-aligned lists (keys, values).

    Insertion order is list order. Lookups scan linearly, so this backend
    suits small maps where order matters and hashing overhead does not pay off.
    """

    __slots__ = ("_keys", "_vals")

    def __init__(self) -> None:
        self._keys: list[K] = []
        self._vals: list[V] = []

    def _index(self, k: K) -> int:
        for i, key in enumerate(self._keys):
            if key == k:
                return i
        return -1

    def put(self, k: K, v: V) -> Self:
        idx = self._index(k)
        if idx >= 0:
            self._vals[idx] = v
        else:
            self._keys.append(k)
            self._vals.append(v)
        return self

    def get(self, k: K) -> tuple[V | None, bool]:
        idx = self._index(k)
        if idx < 0:
            return None, False
        return self._vals[idx], True

    def delete(self, k: K) -> tuple[V | None, bool]:
        idx = self._index(k)
        if idx < 0:
            return None, False
        del self._keys[idx]
        return self._vals.pop(idx), True

    def keys(self) -> list[K]:
        return list(self._keys)

    def values(self) -> list[V]:
        return list(self._vals)

    def clear(self) -> Self:
        # truncate in place, list keeps its allocation
        del self._keys[:]
        del self._vals[:]
        return self

    def size(self) -> int:
        return len(self._keys)

    def contains(self, k: K) -> bool:
        return self._index(k) >= 0

    def each(self, fn: Callable[[K, V], object]) -> None:
        for k, v in zip(self._keys, self._vals, strict=True):
            fn(k, v)

    def first(self) -> tuple[K | None, V | None, bool]:
        if not self._keys:
            return None, None, False
        return self._keys[0], self._vals[0], True

    def last(self) -> tuple[K | None, V | None, bool]:
        if not self._keys:
            return None, None, False
        return self._keys[-1], self._vals[-1], True
