"""Exception classes for rclist."""


class RcListError(Exception):
    """Base exception for all rclist errors."""


class BorrowConflictError(RcListError):
    """Raised when a node is mutated while a view of it is outstanding, or viewed while being mutated."""


class ViewReleasedError(RcListError):
    """Raised when reading a value view that has already been released."""


class IteratorInvalidatedError(RcListError):
    """Raised when advancing an iterator whose list has been popped since it was created."""


class ValueOutOfRangeError(RcListError, ValueError):
    """Raised when a payload is not an unsigned 32-bit integer."""


class ForeignViewError(RcListError, ValueError):
    """Raised when a view taken from one list is used to position an iterator on another."""
