"""Tests for borrow tracking and value views."""

import operator

import pytest

from rclist import BorrowConflictError, BorrowFlag, DoublyLinkedList, Node, Ref, ViewReleasedError


def test_flag_starts_unborrowed() -> None:
    """Test a fresh borrow flag."""
    flag = BorrowFlag()
    assert flag.shared == 0
    assert not flag.exclusive


def test_shared_borrows_coexist() -> None:
    """Test that several shared borrows may be held at once."""
    flag = BorrowFlag()
    with flag.borrowed():
        with flag.borrowed():
            assert flag.shared == 2
    assert flag.shared == 0


def test_exclusive_conflicts_with_shared() -> None:
    """Test that a mutable borrow fails while a shared one is held."""
    flag = BorrowFlag()
    flag.acquire_shared()
    with pytest.raises(BorrowConflictError):
        with flag.borrowed_mut():
            pass
    assert not flag.exclusive
    flag.release_shared()

    with flag.borrowed_mut():
        assert flag.exclusive
    assert not flag.exclusive


def test_shared_conflicts_with_exclusive() -> None:
    """Test that shared and nested mutable borrows fail during a mutation."""
    flag = BorrowFlag()
    with flag.borrowed_mut():
        with pytest.raises(BorrowConflictError):
            flag.acquire_shared()
        with pytest.raises(BorrowConflictError):
            with flag.borrowed_mut():
                pass
        assert flag.shared == 0


def test_exclusive_released_on_error() -> None:
    """Test that an exception inside a mutation still releases the borrow."""
    flag = BorrowFlag()
    with pytest.raises(KeyError):
        with flag.borrowed_mut():
            raise KeyError("boom")
    assert not flag.exclusive


def test_unbalanced_release() -> None:
    """Test releasing a shared borrow that was never taken."""
    with pytest.raises(RuntimeError):
        BorrowFlag().release_shared()


def test_ref_reads_node_value() -> None:
    """Test the comparisons and conversions a view supports."""
    node = Node(42)
    ref = Ref(node)
    assert node.flag.shared == 1
    assert ref.value == 42
    assert ref.get() == 42
    assert ref == 42
    assert ref != 41
    assert ref != "42"
    assert ref == Ref(node)
    assert int(ref) == 42
    assert operator.index(ref) == 42
    assert hash(ref) == hash(42)
    assert repr(ref) == "<Ref 42>"
    assert ref.node is node


def test_ref_release() -> None:
    """Test explicit release of a view."""
    node = Node(1)
    ref = Ref(node)
    ref.release()
    assert ref.released
    assert node.flag.shared == 0
    assert repr(ref) == "<Ref released>"
    with pytest.raises(ViewReleasedError):
        _ = ref.value
    with pytest.raises(ViewReleasedError):
        _ = ref.node

    # Releasing again does not underflow the count
    ref.release()
    assert node.flag.shared == 0


def test_ref_context_manager() -> None:
    """Test that leaving a with block releases the view."""
    node = Node(5)
    with Ref(node) as ref:
        assert ref == 5
        assert node.flag.shared == 1
    assert ref.released
    assert node.flag.shared == 0


def test_ref_during_mutation_conflicts() -> None:
    """Test that a view cannot be taken while its node is being mutated."""
    node = Node(5)
    with node.flag.borrowed_mut():
        with pytest.raises(BorrowConflictError):
            Ref(node)
    assert node.flag.shared == 0


def test_released_ref_comparisons() -> None:
    """Test that a released view answers comparisons instead of raising."""
    node = Node(1)
    ref = Ref(node)
    live = Ref(node)
    members = {ref}
    ref.release()

    assert not (ref == 1)
    assert ref != 1
    assert ref == ref
    assert ref != live
    assert live != ref
    assert ref in members
    assert hash(ref) == hash(1)


def test_released_views_from_list_compare_unequal() -> None:
    """Test comparing views that the iterator has already released."""
    lst = DoublyLinkedList()
    lst.push_back(1)
    lst.push_back(2)
    views = list(lst)
    assert all(v.released for v in views)
    assert views[0] != 1


def test_ref_owner_defaults_to_none() -> None:
    """Test that a view built directly on a node has no owning list."""
    assert Ref(Node(3)).owner is None
