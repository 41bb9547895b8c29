"""
Insertion-ordered map with O(1) get/put/delete and O(1) reordering.

A dict indexes key -> Node, and the same nodes are threaded into a doubly
linked list from head (oldest) to tail (newest):

    _index:  {"a": n1, "b": n2, "c": n3}
    list:    head -> n1 <-> n2 <-> n3 <- tail

Invariants:
  - len(_index) == number of nodes reachable from head == _size
  - head.prev is None and tail.next is None
  - a key owns exactly one node; put() on an existing key mutates it in place

move_to_end()/move_to_front() reposition a node without touching the index,
which is what an LRU policy needs: touch -> move_to_end, evict -> delete(first).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Self

from colx.mapx.types import K, Map, Node, Reorderable, V


class LinkedMap(Map[K, V]):
    __slots__ = ("_head", "_index", "_size", "_tail")

    def __init__(self) -> None:
        self._index: dict[K, Node[K, V]] = {}
        self._head: Node[K, V] | None = None
        self._tail: Node[K, V] | None = None
        self._size: int = 0

    # ---------- list plumbing ----------

    def _unlink(self, node: Node[K, V]) -> None:
        """Splice node out of the list; the index is left untouched."""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = None
        node.next = None

    def _link_last(self, node: Node[K, V]) -> None:
        node.prev = self._tail
        node.next = None
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node

    def _link_first(self, node: Node[K, V]) -> None:
        node.prev = None
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node

    def _nodes(self) -> Iterator[Node[K, V]]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    # ---------- Map contract ----------

    def put(self, k: K, v: V) -> Self:
        node = self._index.get(k)
        if node is not None:
            node.value = v
            return self

        node = Node(k, v)
        self._link_last(node)
        self._index[k] = node
        self._size += 1
        return self

    def get(self, k: K) -> tuple[V | None, bool]:
        node = self._index.get(k)
        if node is None:
            return None, False
        return node.value, True

    def delete(self, k: K) -> tuple[V | None, bool]:
        node = self._index.pop(k, None)
        if node is None:
            return None, False
        self._unlink(node)
        self._size -= 1
        return node.value, True

    def keys(self) -> list[K]:
        return [node.key for node in self._nodes()]

    def values(self) -> list[V]:
        return [node.value for node in self._nodes()]

    def clear(self) -> Self:
        # drop index and list wholesale; nodes are released with them
        self._index = {}
        self._head = None
        self._tail = None
        self._size = 0
        return self

    def size(self) -> int:
        return self._size

    def contains(self, k: K) -> bool:
        return k in self._index

    def each(self, fn: Callable[[K, V], object]) -> None:
        for node in self._nodes():
            fn(node.key, node.value)

    # ---------- ordered extensions ----------

    def first(self) -> tuple[K | None, V | None, bool]:
        if self._head is None:
            return None, None, False
        return self._head.key, self._head.value, True

    def last(self) -> tuple[K | None, V | None, bool]:
        if self._tail is None:
            return None, None, False
        return self._tail.key, self._tail.value, True

    def move_to_end(self, k: K) -> bool:
        """Mark k as newest. False if k is absent; no-op if already last."""
        node = self._index.get(k)
        if node is None:
            return False
        if node is not self._tail:
            self._unlink(node)
            self._link_last(node)
        return True

    def move_to_front(self, k: K) -> bool:
        """Mark k as oldest. False if k is absent; no-op if already first."""
        node = self._index.get(k)
        if node is None:
            return False
        if node is not self._head:
            self._unlink(node)
            self._link_first(node)
        return True

    def as_reorderable(self) -> Reorderable[K]:
        return self
