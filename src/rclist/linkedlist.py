"""Doubly-linked list of u32 values with shared, borrow-checked nodes."""

import logging

from rclist.borrow import BorrowFlag, Ref
from rclist.errors import ForeignViewError
from rclist.iterator import ListIterator
from rclist.types import check_u32

logger = logging.getLogger(__name__)


class Node:
    """A node in the doubly-linked list."""

    __slots__ = ("_value", "prev", "next", "flag")

    def __init__(self, value: int) -> None:
        self._value = value
        self.prev: Node | None = None
        self.next: Node | None = None
        self.flag = BorrowFlag()

    @property
    def value(self) -> int:
        """Payload, fixed at construction."""
        return self._value

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} {self._value}: "
            f"prev={None if self.prev is None else self.prev._value} "
            f"next={None if self.next is None else self.next._value}>"
        )


class DoublyLinkedList:
    """
    Doubly-linked list whose nodes are shared between the list and their neighbours.

    The list owns its head and tail slots; every node is additionally referenced
    by the ``next``/``prev`` slots of its neighbours. Link updates take an
    exclusive borrow of the node being rewired, so they fail with
    BorrowConflictError while a view of that node is outstanding.

    By default pops only move the head/tail slot: the size counter is left as
    is and the detached node keeps its link into the list. Pass
    ``unlink_on_pop=True`` to have pops clear both sides of the broken link and
    decrement the size.
    """

    def __init__(self, *, unlink_on_pop: bool = False) -> None:
        """
        Initialize an empty list.

        Args:
            unlink_on_pop: If True, pop_front()/pop_back() detach the node fully
                and decrement size(). Defaults to False, where pops only advance
                the head/tail slot.
        """
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        self._unlink_on_pop = unlink_on_pop
        # Bumped on every pop so iterators can detect removal
        self._generation = 0

    @property
    def unlink_on_pop(self) -> bool:
        """Whether pops fully detach nodes."""
        return self._unlink_on_pop

    @property
    def generation(self) -> int:
        """Number of pops applied so far."""
        return self._generation

    def push_back(self, value: int) -> None:
        """
        Append a value after the current tail. O(1).

        Raises:
            ValueOutOfRangeError: If value is not an unsigned 32-bit integer
            BorrowConflictError: If a view of the current tail is outstanding
        """
        node = Node(check_u32(value))
        tail = self._tail
        if tail is None:
            self._head = node
        else:
            with tail.flag.borrowed_mut():
                tail.next = node
            node.prev = tail
        self._tail = node
        self._size += 1

    def push_front(self, value: int) -> None:
        """
        Prepend a value before the current head. O(1).

        Raises:
            ValueOutOfRangeError: If value is not an unsigned 32-bit integer
            BorrowConflictError: If a view of the current head is outstanding
        """
        node = Node(check_u32(value))
        head = self._head
        if head is None:
            self._tail = node
        else:
            with head.flag.borrowed_mut():
                head.prev = node
            node.next = head
        self._head = node
        self._size += 1

    def peek_front(self) -> Ref | None:
        """Return a live view of the head value, or None if there is no head."""
        if self._head is None:
            return None
        return Ref(self._head, self)

    def peek_back(self) -> Ref | None:
        """Return a live view of the tail value, or None if there is no tail."""
        if self._tail is None:
            return None
        return Ref(self._tail, self)

    def pop_back(self) -> None:
        """
        Detach the tail node by moving the tail slot to its predecessor.

        Popping an empty tail is a no-op.

        Raises:
            BorrowConflictError: With unlink_on_pop, if a view of the detached
                node or of its predecessor is outstanding
        """
        tail = self._tail
        if tail is None:
            logger.debug("pop_back() on a list with no tail")
            return
        if self._unlink_on_pop:
            with tail.flag.borrowed_mut():
                new_tail = tail.prev
                if new_tail is None:
                    self._head = None
                else:
                    with new_tail.flag.borrowed_mut():
                        new_tail.next = None
                    tail.prev = None
            self._size -= 1
        else:
            with tail.flag.borrowed():
                new_tail = tail.prev
        self._tail = new_tail
        self._generation += 1

    def pop_front(self) -> None:
        """
        Detach the head node by moving the head slot to its successor.

        Popping an empty head is a no-op.

        Raises:
            BorrowConflictError: With unlink_on_pop, if a view of the detached
                node or of its successor is outstanding
        """
        head = self._head
        if head is None:
            logger.debug("pop_front() on a list with no head")
            return
        if self._unlink_on_pop:
            with head.flag.borrowed_mut():
                new_head = head.next
                if new_head is None:
                    self._tail = None
                else:
                    with new_head.flag.borrowed_mut():
                        new_head.prev = None
                    head.next = None
            self._size -= 1
        else:
            with head.flag.borrowed():
                new_head = head.next
        self._head = new_head
        self._generation += 1

    def size(self) -> int:
        """Return the tracked node count."""
        return self._size

    def is_empty(self) -> bool:
        """Return True if neither a head nor a tail is present."""
        return self._head is None and self._tail is None

    def iter(self) -> ListIterator:
        """Return an iterator over views of the values, starting at the head."""
        return ListIterator(self, self._head)

    def iter_from(self, start: Ref) -> ListIterator:
        """
        Return an iterator starting at the node behind an existing view of this list.

        Raises:
            ForeignViewError: If the view was not taken from this list
            ViewReleasedError: If the view has been released
        """
        if start.owner is not self:
            raise ForeignViewError("View does not belong to this list")
        return ListIterator(self, start.node)

    def __iter__(self) -> ListIterator:
        return self.iter()

    def __len__(self) -> int:
        """Return the tracked node count."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if a head or a tail is present."""
        return not self.is_empty()

    def __repr__(self) -> str:
        values = []
        node = self._head
        while node is not None:
            with node.flag.borrowed():
                values.append(node.value)
                node = node.next
        return f"{self.__class__.__name__}({values!r})"
