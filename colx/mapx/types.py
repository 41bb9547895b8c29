"""
Shared types for the map backends.

- Entry: immutable (key, value) snapshot handed out by items().
- Node: storage unit of the linked backend (key, value, prev/next links).
- Map: the contract every backend satisfies.
- Reorderable: capability implemented only by the linked backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field
from typing import Generic, Protocol, Self, TypeVar


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
K_contra = TypeVar("K_contra", bound=Hashable, contravariant=True)


@dataclass(slots=True, frozen=True)
class Entry(Generic[K, V]):
    key: K
    value: V


@dataclass(slots=True, eq=False)
class Node(Generic[K, V]):
    key: K
    value: V
    # links are plain references; the owning map drops them on delete
    prev: Node[K, V] | None = field(default=None, repr=False)
    next: Node[K, V] | None = field(default=None, repr=False)


class Reorderable(Protocol[K_contra]):
    """O(1) repositioning of an existing key inside an ordered container."""

    def move_to_end(self, k: K_contra) -> bool: ...

    def move_to_front(self, k: K_contra) -> bool: ...


class Map(ABC, Generic[K, V]):
    """Uniform map contract shared by the hash, array and linked backends."""

    __slots__ = ()

    @abstractmethod
    def put(self, k: K, v: V) -> Self:
        """Insert or overwrite; an existing key keeps its position."""

    @abstractmethod
    def get(self, k: K) -> tuple[V | None, bool]: ...

    @abstractmethod
    def delete(self, k: K) -> tuple[V | None, bool]: ...

    @abstractmethod
    def keys(self) -> list[K]: ...

    @abstractmethod
    def values(self) -> list[V]: ...

    @abstractmethod
    def clear(self) -> Self: ...

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def contains(self, k: K) -> bool: ...

    @abstractmethod
    def each(self, fn: Callable[[K, V], object]) -> None:
        """Call fn(key, value) per entry. fn must not mutate this map."""

    def is_empty(self) -> bool:
        return self.size() == 0

    def items(self) -> list[Entry[K, V]]:
        out: list[Entry[K, V]] = []
        self.each(lambda k, v: out.append(Entry(k, v)))
        return out

    def as_reorderable(self) -> Reorderable[K] | None:
        """Reordering capability of this backend, None when unsupported."""
        return None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, k: object) -> bool:
        return self.contains(k)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __str__(self) -> str:
        parts: list[str] = []
        self.each(lambda k, v: parts.append(f"{k}:{v}"))
        return "map[" + " ".join(parts) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


__all__ = ["Entry", "K", "Map", "Node", "Reorderable", "V"]
