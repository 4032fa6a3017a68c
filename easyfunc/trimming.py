"""Stripping characters from the ends of strings."""

from enum import IntEnum

__all__ = ["TrimType", "common_trim", "trim", "ltrim", "rtrim"]

# Space, newline, carriage return, tab, vertical tab, NUL and the digit zero.
_COMMON_CUT_SET = " \n\r\t\v\x000"
_DEFAULT_CUT_SET = " \r\n\t\v\x000"


class TrimType(IntEnum):
    """Which ends of a string :func:`common_trim` strips."""

    DEFAULT = 0
    LEFT = 1
    RIGHT = 2


def common_trim(trim_type: TrimType, text: str, *args: str) -> str:
    """Strip the characters of a cut set from one or both ends of ``text``.

    The cut set is the first extra argument, or a default set of whitespace,
    NUL and ``"0"``. An empty cut set strips nothing.
    """
    cut_set = frozenset(args[0] if args else _COMMON_CUT_SET)
    length = len(text)

    left = 0
    if trim_type != TrimType.RIGHT:
        while left < length and text[left] in cut_set:
            left += 1

    right = length - 1
    if trim_type != TrimType.LEFT and left != right:
        while right >= 0 and text[right] in cut_set:
            right -= 1

    return text[left : right + 1]


def trim(text: str, *args: str) -> str:
    """Strip the cut set (default whitespace, NUL and ``"0"``) from both ends."""
    return text.strip(args[0] if args else _DEFAULT_CUT_SET)


def ltrim(text: str, *args: str) -> str:
    """Strip the cut set (default whitespace, NUL and ``"0"``) from the start."""
    return text.lstrip(args[0] if args else _DEFAULT_CUT_SET)


def rtrim(text: str, *args: str) -> str:
    """Strip the cut set (default whitespace, NUL and ``"0"``) from the end."""
    return text.rstrip(args[0] if args else _DEFAULT_CUT_SET)