"""Forward cursor over a DoublyLinkedList."""

from typing import TYPE_CHECKING

from rclist.borrow import Ref
from rclist.errors import IteratorInvalidatedError
from rclist.types import NodeHandle

if TYPE_CHECKING:
    from rclist.linkedlist import DoublyLinkedList


class ListIterator:
    """
    Lazy, forward-only iterator yielding a view per node.

    Each yielded view is released when the iterator advances or is exhausted,
    so callers that need a value past that point should read it out first.
    Popping the list after the iterator is created invalidates it.
    """

    def __init__(self, owner: "DoublyLinkedList", start: "NodeHandle | None") -> None:
        self._owner = owner
        self._generation = owner.generation
        self._current = start
        self._last: Ref | None = None

    def __iter__(self) -> "ListIterator":
        return self

    def __next__(self) -> Ref:
        self._release_last()
        node = self._current
        if node is None:
            raise StopIteration
        if self._generation != self._owner.generation:
            self._current = None
            raise IteratorInvalidatedError("List was popped during iteration")
        with node.flag.borrowed():
            self._current = node.next
        self._last = Ref(node, self._owner)
        return self._last

    def close(self) -> None:
        """Release the last yielded view and stop the iteration."""
        self._release_last()
        self._current = None

    def _release_last(self) -> None:
        if self._last is not None:
            self._last.release()
            self._last = None
