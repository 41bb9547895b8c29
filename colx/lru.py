from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

from colx.config import ColxSettings, get_settings
from colx.logger import get_logger
from colx.mapx import LinkedMap
from colx.setx import LinkedSet


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

log = get_logger("colx.lru")


def _resolve_capacity(capacity: int | None, config: ColxSettings | None) -> int:
    if capacity is None:
        capacity = (config or get_settings()).lru.capacity
    return max(1, int(capacity))


class LRUCache(Generic[K, V]):
    """O(1) get/put + eviction by capacity on top of LinkedMap (front = LRU)."""

    __slots__ = ("_capacity", "_data", "_on_evict")

    def __init__(
        self,
        capacity: int | None = None,
        *,
        on_evict: Callable[[K, V], object] | None = None,
        config: ColxSettings | None = None,
    ) -> None:
        self._data: LinkedMap[K, V] = LinkedMap()
        self._capacity: int = _resolve_capacity(capacity, config)
        self._on_evict = on_evict

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, k: K) -> tuple[V | None, bool]:
        v, found = self._data.get(k)
        if found:
            self._data.move_to_end(k)
        return v, found

    def peek(self, k: K) -> tuple[V | None, bool]:
        return self._data.get(k)

    def put(self, k: K, v: V) -> LRUCache[K, V]:
        if self._data.contains(k):
            self._data.put(k, v)
            self._data.move_to_end(k)
            return self
        if self._data.size() >= self._capacity:
            self._evict_oldest()
        self._data.put(k, v)
        return self

    def _evict_oldest(self) -> None:
        k, v, ok = self._data.first()
        if not ok:
            return
        self._data.delete(k)  # type: ignore[arg-type]
        log.debug("lru.evict", key=k, capacity=self._capacity)
        if self._on_evict is not None:
            self._on_evict(k, v)  # type: ignore[arg-type]

    def delete(self, k: K) -> tuple[V | None, bool]:
        return self._data.delete(k)

    def contains(self, k: K) -> bool:
        return self._data.contains(k)

    def keys(self) -> list[K]:
        """Keys from least to most recently used."""
        return self._data.keys()

    def size(self) -> int:
        return self._data.size()

    def clear(self) -> LRUCache[K, V]:
        self._data.clear()
        return self

    def __len__(self) -> int:
        return self._data.size()

    def __contains__(self, k: object) -> bool:
        return self._data.contains(k)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, {self._data})"


class LRUSet(Generic[K]):
    """O(1) membership + eviction by capacity using LinkedSet."""

    __slots__ = ("_capacity", "_data")

    def __init__(self, capacity: int | None = None, *, config: ColxSettings | None = None) -> None:
        self._data: LinkedSet[K] = LinkedSet()
        self._capacity: int = _resolve_capacity(capacity, config)

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, key: K) -> None:
        if self._data.move_to_end(key):
            return
        if self._data.size() >= self._capacity:
            oldest, ok = self._data.first()
            if ok:
                self._data.remove(oldest)  # type: ignore[arg-type]
                log.debug("lru.evict", key=oldest, capacity=self._capacity)
        self._data.add(key)

    def elems(self) -> list[K]:
        """Elements from least to most recently used."""
        return self._data.elems()

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        # a hit refreshes recency
        return self._data.move_to_end(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._data)


__all__ = ["LRUCache", "LRUSet"]
