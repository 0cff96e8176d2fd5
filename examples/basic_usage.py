"""Basic usage example for rclist."""

import logging

from rclist import BorrowConflictError, DoublyLinkedList


def main() -> None:
    """Demonstrate pushes, peeks, borrow conflicts and iteration."""
    logging.basicConfig(level=logging.DEBUG)

    lst = DoublyLinkedList()

    print("=== Building a list ===\n")
    for value in (1, 2, 3):
        lst.push_back(value)
    lst.push_front(0)
    print(f"List: {lst!r}, size={lst.size()}\n")

    print("=== Views hold a borrow ===\n")
    back = lst.peek_back()
    print(f"Back view: {back!r}")
    try:
        lst.push_back(4)
    except BorrowConflictError as exc:
        print(f"  push_back refused while the tail is viewed: {exc}")
    if back is not None:
        back.release()
    lst.push_back(4)
    print(f"  after release: {lst!r}\n")

    print("=== Iteration ===\n")
    for view in lst:
        print(f"  {view.value}")

    print("\n=== Default pop only moves the tail ===\n")
    lst.pop_back()
    print(f"size() still reports {lst.size()}")

    strict = DoublyLinkedList(unlink_on_pop=True)
    for value in (1, 2, 3):
        strict.push_back(value)
    strict.pop_back()
    print(f"With unlink_on_pop: {strict!r}, size={strict.size()}")


if __name__ == "__main__":
    main()
