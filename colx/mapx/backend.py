from __future__ import annotations

from enum import StrEnum

from colx.errors import UnknownBackendError


class Backend(StrEnum):
    """Storage strategies available for maps and sets."""

    # native dict, no ordering guarantee
    HASH = "hash"
    # parallel key/value lists, insertion order, linear lookup
    ARRAY = "array"
    # dict index + doubly linked list, insertion order, O(1) reordering
    LINKED = "linked"

    @classmethod
    def parse(cls, value: Backend | str) -> Backend:
        if isinstance(value, Backend):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownBackendError(value) from None
