from __future__ import annotations

from collections.abc import Callable
from typing import Self

from colx.mapx.types import K, Map, V


class HashMap(Map[K, V]):
    """Pass-through to a native dict. Iteration order is unspecified."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[K, V] = {}

    def put(self, k: K, v: V) -> Self:
        self._data[k] = v
        return self

    def get(self, k: K) -> tuple[V | None, bool]:
        if k in self._data:
            return self._data[k], True
        return None, False

    def delete(self, k: K) -> tuple[V | None, bool]:
        if k in self._data:
            return self._data.pop(k), True
        return None, False

    def keys(self) -> list[K]:
        return list(self._data)

    def values(self) -> list[V]:
        return list(self._data.values())

    def clear(self) -> Self:
        self._data = {}
        return self

    def size(self) -> int:
        return len(self._data)

    def contains(self, k: K) -> bool:
        return k in self._data

    def each(self, fn: Callable[[K, V], object]) -> None:
        for k, v in self._data.items():
            fn(k, v)
