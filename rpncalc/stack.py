"""A fixed-capacity stack of floating-point values."""

from __future__ import annotations

STACK_SIZE = 20


class StackError(Exception):
    """Base class for stack errors."""


class StackFullError(StackError):
    """Raised when pushing onto a stack that is already full."""


class StackEmptyError(StackError, IndexError):
    """Raised when reading from a stack that holds no items."""


class Stack:
    """A last-in, first-out stack that holds at most ``capacity`` floats."""

    def __init__(self, capacity: int = STACK_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[float] = []

    def push(self, value: float) -> None:
        """Place ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError(f"stack is full ({self.capacity} items)")
        self._items.append(float(value))

    def pop(self) -> float:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> float:
        """Return the value on top of the stack without removing it."""
        if not self._items:
            raise StackEmptyError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self.capacity})"