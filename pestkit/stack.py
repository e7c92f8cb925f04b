"""A stack that records its operations so it can be rewound to snapshots."""

from __future__ import annotations

import enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _OpKind(enum.Enum):
    PUSH = enum.auto()
    POP = enum.auto()


class Stack(Generic[T]):
    """A stack with snapshots; `restore` undoes everything since the last one."""

    def __init__(self) -> None:
        self._ops: list[tuple[_OpKind, T]] = []
        self._cache: list[T] = []
        self._snapshots: list[int] = []

    def is_empty(self) -> bool:
        """Whether the stack holds no elements."""
        return not self._cache

    def peek(self) -> T | None:
        """Return the top element, or None if the stack is empty."""
        return self._cache[-1] if self._cache else None

    def push(self, elem: T) -> None:
        """Push `elem` onto the stack."""
        self._ops.append((_OpKind.PUSH, elem))
        self._cache.append(elem)

    def pop(self) -> T | None:
        """Remove and return the top element, or None if the stack is empty."""
        if not self._cache:
            return None
        value = self._cache.pop()
        self._ops.append((_OpKind.POP, value))
        return value

    def __len__(self) -> int:
        return len(self._cache)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return list(self._cache[index])
        return self._cache[index]

    def snapshot(self) -> None:
        """Record the current state so it can be restored later."""
        self._snapshots.append(len(self._ops))

    def clear_snapshot(self) -> None:
        """Drop the most recent snapshot, keeping the current state."""
        if self._snapshots:
            self._snapshots.pop()

    def restore(self) -> None:
        """Rewind to the most recent snapshot, or to empty if there is none."""
        if not self._snapshots:
            self._cache.clear()
            self._ops.clear()
            return
        index = self._snapshots.pop()
        for kind, elem in reversed(self._ops[index:]):
            if kind is _OpKind.PUSH:
                self._cache.pop()
            else:
                self._cache.append(elem)
        del self._ops[index:]

    def __repr__(self) -> str:
        return f"Stack({self._cache!r})"