"""Inspecting and dumping values."""

from collections.abc import Mapping, Sequence

__all__ = ["boolval", "debug_zval_dump", "is_int", "is_array"]


def boolval(value: object) -> bool:
    """Return False for an empty string or the integer 0, True otherwise."""
    if value is None:
        raise TypeError("value must not be None")
    if isinstance(value, str) and value == "":
        return False
    if is_int(value) and value == 0:
        return False
    return True


def debug_zval_dump(*args: object) -> None:
    """Print the representation of each value on a line of its own."""
    for value in args:
        print(repr(value))


def is_int(value: object) -> bool:
    """Return True if ``value`` is an integer (booleans excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_array(value: object) -> bool:
    """Return True for lists, tuples, mappings and other non-string sequences."""
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Sequence, Mapping))