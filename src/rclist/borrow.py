"""Run-time borrow tracking for list nodes."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rclist.errors import BorrowConflictError, ViewReleasedError

if TYPE_CHECKING:
    from rclist.linkedlist import DoublyLinkedList, Node

logger = logging.getLogger(__name__)


@dataclass
class BorrowFlag:
    """
    Shared/exclusive borrow state of a single node.

    Any number of shared borrows may coexist. An exclusive borrow requires that
    no other borrow of either kind is held. Conflicts raise immediately, before
    the caller touches the node.
    """

    shared: int = 0  # outstanding read-only borrows
    exclusive: bool = False  # True while a mutation is in progress

    def acquire_shared(self) -> None:
        """Take a shared borrow that the caller must later give back via release_shared()."""
        if self.exclusive:
            logger.debug("Shared borrow requested while node is being mutated")
            raise BorrowConflictError("Node is already mutably borrowed")
        self.shared += 1

    def release_shared(self) -> None:
        """Give back a shared borrow."""
        if self.shared <= 0:
            raise RuntimeError("release_shared() called without a matching acquire_shared()")
        self.shared -= 1

    @contextmanager
    def borrowed(self) -> Iterator[None]:
        """Hold a shared borrow for the duration of the block."""
        self.acquire_shared()
        try:
            yield
        finally:
            self.release_shared()

    @contextmanager
    def borrowed_mut(self) -> Iterator[None]:
        """Hold the exclusive borrow for the duration of the block."""
        if self.exclusive or self.shared:
            logger.debug(
                "Mutable borrow conflict: exclusive=%s, shared=%d", self.exclusive, self.shared
            )
            raise BorrowConflictError(
                f"Node is already borrowed ({self.shared} outstanding view(s))"
                if self.shared
                else "Node is already mutably borrowed"
            )
        self.exclusive = True
        try:
            yield
        finally:
            self.exclusive = False


class Ref:
    """
    Read-only view of a node's value.

    The view holds a shared borrow on its node until it is released, so the
    list cannot mutate that node in the meantime. It reads the node's storage
    each time instead of keeping a copy. Release happens on ``release()``, on
    leaving a ``with`` block, or when the view is garbage collected.

    A released view compares equal only to itself; its hash stays that of the
    payload, which never changes.
    """

    __slots__ = ("_node", "_owner", "_released")

    def __init__(self, node: "Node", owner: "DoublyLinkedList | None" = None) -> None:
        node.flag.acquire_shared()
        self._node = node
        self._owner = owner
        self._released = False

    @property
    def value(self) -> int:
        """The node's payload."""
        if self._released:
            raise ViewReleasedError("View has been released")
        return self._node.value

    def get(self) -> int:
        """Return the node's payload."""
        return self.value

    @property
    def released(self) -> bool:
        """True once the shared borrow has been given back."""
        return self._released

    @property
    def node(self) -> "Node":
        """The node this view is bound to."""
        if self._released:
            raise ViewReleasedError("View has been released")
        return self._node

    @property
    def owner(self) -> "DoublyLinkedList | None":
        """The list the view was taken from, if any."""
        return self._owner

    def release(self) -> None:
        """Give back the shared borrow. Releasing twice is a no-op."""
        if not self._released:
            self._released = True
            self._node.flag.release_shared()

    def __enter__(self) -> "Ref":
        return self

    def __exit__(self, *args: object) -> None:
        self.release()

    def __del__(self) -> None:
        # Partially constructed views never took a borrow
        if not getattr(self, "_released", True):
            self.release()

    def __eq__(self, other: object) -> bool:
        if self._released:
            return NotImplemented
        if isinstance(other, Ref):
            return not other._released and self._node.value == other._node.value
        if isinstance(other, int):
            return self._node.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._node.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        if self._released:
            return f"<{self.__class__.__name__} released>"
        return f"<{self.__class__.__name__} {self._node.value}>"
