"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "SinglyLinkedList", "DoublyLinkedList"]


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list."""

    value: Any
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class SinglyLinkedList:
    """A singly linked list with a head and a tail reference."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the head and return its node."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def append(self, value: Any) -> Node:
        """Insert ``value`` at the tail and return its node."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def insert_after_node(self, node: Node, value: Any) -> Node:
        """Insert ``value`` right after ``node``, which must belong to this list."""
        if not any(candidate is node for candidate in self.nodes()):
            raise ValueError("node does not belong to this list")
        new_node = Node(value, node.next)
        node.next = new_node
        if node is self._tail:
            self._tail = new_node
        self._size += 1
        return new_node

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        for position, node in enumerate(self.nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range")

    def insert_after(self, index: int, value: Any) -> Node:
        """Insert ``value`` after the node at position ``index`` (0-based)."""
        return self.insert_after_node(self._node_at(index), value)

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        if self._head.next is None:
            return self.pop_front()
        previous = self._head
        while previous.next is not self._tail:
            previous = previous.next  # type: ignore[assignment]
        last = self._tail
        previous.next = None
        self._tail = previous
        self._size -= 1
        return last.value  # type: ignore[union-attr]

    def remove_at(self, index: int) -> Any:
        """Remove and return the value at position ``index`` (0-based)."""
        if index == 0:
            if self._head is None:
                raise IndexError(f"index {index} out of range")
            return self.pop_front()
        previous = self._node_at(index - 1)
        target = previous.next
        if target is None:
            raise IndexError(f"index {index} out of range")
        previous.next = target.next
        if target is self._tail:
            self._tail = previous
        self._size -= 1
        return target.value

    def remove(self, value: Any) -> bool:
        """Remove the first occurrence of ``value``; tell whether one was found."""
        previous: Node | None = None
        for node in self.nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return True
            previous = node
        return False

    def positions(self, value: Any) -> list[int]:
        """Every 0-based position holding ``value``."""
        return [index for index, item in enumerate(self) if item == value]

    def middle(self) -> Any:
        """The middle value; for an even length, the second of the two middles."""
        if self._head is None:
            raise IndexError("middle of empty list")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next  # type: ignore[assignment]
        return slow.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def nodes(self) -> Iterator[Node]:
        """Iterate over the nodes from head to tail."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)


@dataclass(eq=False, repr=False)
class _DoubleNode:
    value: Any
    prev: Optional["_DoubleNode"] = None
    next: Optional["_DoubleNode"] = None


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def append(self, value: Any) -> None:
        """Insert ``value`` at the tail."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size