"""Stacks, queues and a deque with fixed or linked storage, plus a tiny binary tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from algobox.linked_list import Node

__all__ = [
    "LinkedStack",
    "ArrayQueue",
    "CircularDeque",
    "QueueFromStacks",
    "StackFromQueues",
    "TreeNode",
    "SimpleBinaryTree",
]


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    return capacity


class LinkedStack:
    """A LIFO stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Node | None = None
        self._size = 0

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("peek at empty stack")
        return self._top.value

    def clear(self) -> None:
        """Drop every element."""
        self._top = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class ArrayQueue:
    """A FIFO queue over a fixed number of slots.

    Slots freed by dequeuing are not reused until the queue becomes empty,
    so the queue may report overflow while holding fewer than ``capacity``
    items.
    """

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r}, capacity={self.capacity})"

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise OverflowError when no slot is left."""
        if not self._items:
            self._slots_used = 0
        if self._slots_used >= self.capacity:
            raise OverflowError("queue overflow")
        self._items.append(value)
        self._slots_used += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        value = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return value

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class CircularDeque:
    """A double-ended queue stored in a circular buffer of fixed capacity."""

    def __init__(self, capacity: int = 5) -> None:
        self._buffer: list[Any] = [None] * _check_capacity(capacity)
        self._front = 0
        self._size = 0

    def __repr__(self) -> str:
        return f"CircularDeque({list(self)!r}, capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def _slot(self, offset: int) -> int:
        return (self._front + offset) % self.capacity

    def _ensure_room(self) -> None:
        if self._size == self.capacity:
            raise OverflowError("deque is full")

    def _ensure_items(self) -> None:
        if self._size == 0:
            raise IndexError("deque is empty")

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the front."""
        self._ensure_room()
        self._front = self._slot(-1)
        self._buffer[self._front] = value
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Add ``value`` after the rear."""
        self._ensure_room()
        self._buffer[self._slot(self._size)] = value
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        self._ensure_items()
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = self._slot(1)
        self._size -= 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the rear value."""
        self._ensure_items()
        index = self._slot(self._size - 1)
        value = self._buffer[index]
        self._buffer[index] = None
        self._size -= 1
        return value

    def peek_front(self) -> Any:
        """Return the front value without removing it."""
        self._ensure_items()
        return self._buffer[self._front]

    def peek_back(self) -> Any:
        """Return the rear value without removing it."""
        self._ensure_items()
        return self._buffer[self._slot(self._size - 1)]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return (self._buffer[self._slot(offset)] for offset in range(self._size))

    def __len__(self) -> int:
        return self._size


class QueueFromStacks:
    """A FIFO queue built from two stacks, with the cost paid on push."""

    def __init__(self) -> None:
        self._main: list[Any] = []
        self._spare: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._main:
            raise IndexError("queue is empty")
        return self._main.pop()

    def __len__(self) -> int:
        return len(self._main)


class StackFromQueues:
    """A LIFO stack built from two queues, with the cost paid on push."""

    def __init__(self) -> None:
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        while self._main:
            self._spare.append(self._main.popleft())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.popleft())

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._main:
            raise IndexError("stack underflow")
        return self._main.popleft()

    def __len__(self) -> int:
        return len(self._main)


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class SimpleBinaryTree:
    """A binary tree of at most three nodes: a root and its two children."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, value: Any) -> TreeNode:
        """Place ``value`` at the root, then the left child, then the right child."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
        elif self.root.left is None:
            self.root.left = node
        elif self.root.right is None:
            self.root.right = node
        else:
            raise OverflowError("tree already holds a root and both children")
        return node

    def values(self) -> list[Any]:
        """The stored values in order root, left, right."""
        if self.root is None:
            return []
        nodes = (self.root, self.root.left, self.root.right)
        return [node.value for node in nodes if node is not None]