"""A doubly linked list with a sentinel head."""

import operator


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value=None):
        self.value = value
        self.prev = self
        self.next = self


class LinkedList:
    """A circular doubly linked list addressed by position."""

    def __init__(self, values=()):
        self._head = _Node()
        self._length = 0
        for value in values:
            self.append(value)

    def _check_index(self, index, upper):
        index = operator.index(index)
        if not 0 <= index < upper:
            raise IndexError(f"list index {index} out of range")
        return index

    def _node_at(self, index):
        node = self._head.next
        for _ in range(index):
            node = node.next
        return node

    def _link_before(self, node, value):
        new = _Node(value)
        new.next = node
        new.prev = node.prev
        node.prev.next = new
        node.prev = new
        self._length += 1

    def append(self, value):
        """Add ``value`` at the end."""
        self._link_before(self._head, value)

    def prepend(self, value):
        """Add ``value`` at the front."""
        self._link_before(self._head.next, value)

    def set(self, index, value):
        """Replace the value at ``index``."""
        index = self._check_index(index, self._length)
        self._node_at(index).value = value

    def get(self, index):
        """Return the value at ``index``."""
        index = self._check_index(index, self._length)
        return self._node_at(index).value

    def insert(self, index, value):
        """Insert ``value`` before position ``index``; ``index`` may equal the length."""
        index = self._check_index(index, self._length + 1)
        self._link_before(self._node_at(index), value)

    def remove(self, index):
        """Remove the node at ``index`` and return its value."""
        index = self._check_index(index, self._length)
        node = self._node_at(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        self._length -= 1
        return node.value

    def clear(self):
        """Remove every element."""
        self._head.next = self._head
        self._head.prev = self._head
        self._length = 0

    def __len__(self):
        return self._length

    def __iter__(self):
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def __repr__(self):
        return f"LinkedList({list(self)!r})"