"""rclist - Doubly-linked list with shared, run-time borrow-checked nodes."""

from rclist.borrow import BorrowFlag, Ref
from rclist.errors import (
    BorrowConflictError,
    ForeignViewError,
    IteratorInvalidatedError,
    RcListError,
    ValueOutOfRangeError,
    ViewReleasedError,
)
from rclist.iterator import ListIterator
from rclist.linkedlist import DoublyLinkedList, Node
from rclist.types import U32_MAX, check_u32

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "ListIterator",
    "Ref",
    "BorrowFlag",
    "RcListError",
    "BorrowConflictError",
    "ViewReleasedError",
    "IteratorInvalidatedError",
    "ForeignViewError",
    "ValueOutOfRangeError",
    "U32_MAX",
    "check_u32",
]
