from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator
from typing import Generic, Self, TypeVar


T = TypeVar("T", bound=Hashable)


class Set(ABC, Generic[T]):
    """Uniform set contract."""

    __slots__ = ()

    @abstractmethod
    def add(self, t: T) -> Self: ...

    @abstractmethod
    def remove(self, t: T) -> Self:
        """Drop t if present. Removing a missing element is a no-op."""

    @abstractmethod
    def contains(self, t: T) -> bool: ...

    @abstractmethod
    def elems(self) -> list[T]: ...

    @abstractmethod
    def clear(self) -> Self: ...

    @abstractmethod
    def size(self) -> int: ...

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, t: object) -> bool:
        return self.contains(t)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.elems())

    def __str__(self) -> str:
        return "set[" + " ".join(str(t) for t in self.elems()) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


__all__ = ["Set", "T"]
