"""A simple LIFO stack with the extra operations needed for stack-machine code."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

E = TypeVar("E")


class Stack(Generic[E]):
    """A last-in first-out stack whose top is the last element of its data."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: list[E] = []

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def push(self, expr: E) -> None:
        """Put ``expr`` on top of the stack."""
        self._data.append(expr)

    def pop(self) -> E:
        """Remove and return the top element; IndexError if the stack is empty."""
        if not self._data:
            raise IndexError("pop from an empty stack")
        return self._data.pop()

    def __len__(self) -> int:
        return len(self._data)

    def _position(self, depth: int) -> int:
        if not 0 <= depth < len(self._data):
            raise IndexError(f"depth {depth} is out of range for a stack of {len(self._data)}")
        return len(self._data) - 1 - depth

    def swap(self, n: int) -> None:
        """Exchange the top element with the one ``n`` places below it."""
        other = self._position(n)
        top = len(self._data) - 1
        self._data[top], self._data[other] = self._data[other], self._data[top]

    def dup(self, n: int) -> None:
        """Push a copy of the ``n``-th element from the top (``n == 1`` is the top)."""
        if n < 1:
            raise IndexError(f"cannot duplicate element {n}")
        self.push(self.peek_at(n - 1))

    def peek(self) -> E:
        """Return the top element without removing it."""
        return self.peek_at(0)

    def peek_at(self, depth: int) -> E:
        """Return the element at ``depth``; depth 0 is the top of the stack."""
        return self._data[self._position(depth)]

    def down_push(self, expr: E) -> None:
        """Put ``expr`` at the bottom of the stack."""
        self._data.insert(0, expr)

    def __iter__(self) -> Iterator[E]:
        """Iterate from the bottom of the stack to its top."""
        return iter(self._data)

    def multi_pop(self, n: int) -> list[E]:
        """Pop ``n`` elements, returned in the order they were popped."""
        if n > len(self._data):
            raise IndexError(f"cannot pop {n} elements from a stack of {len(self._data)}")
        return [self._data.pop() for _ in range(n)]