"""Type definitions for rclist."""

from typing import TYPE_CHECKING, TypeAlias

from rclist.errors import ValueOutOfRangeError

if TYPE_CHECKING:
    from rclist.linkedlist import Node

# Largest payload a node can carry
U32_MAX = 0xFFFFFFFF

# Shared reference to a node; the node lives while any handle to it does
NodeHandle: TypeAlias = "Node"


def check_u32(value: object) -> int:
    """Return value unchanged if it is an int in [0, U32_MAX], else raise ValueOutOfRangeError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueOutOfRangeError(f"Expected an unsigned 32-bit integer, got {value!r}")
    if not 0 <= value <= U32_MAX:
        raise ValueOutOfRangeError(f"Value {value} is outside [0, {U32_MAX}]")
    return value
