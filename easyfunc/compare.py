"""String comparisons."""

__all__ = ["strcasecmp", "strncmp"]


def _same_letter(a: str, b: str) -> bool:
    return a == b or a.lower() == b.lower() or a.upper() == b.upper()


def strcasecmp(string1: str, string2: str) -> int:
    """Return 0 if the strings are equal ignoring case, otherwise 1."""
    if len(string1) == len(string2) and all(
        _same_letter(a, b) for a, b in zip(string1, string2)
    ):
        return 0
    return 1


def strncmp(str1: str, str2: str, length: int) -> int:
    """Compare at most ``length`` leading characters; return -1, 0 or 1.

    Raises ValueError when ``length`` is negative.
    """
    if length < 0:
        raise ValueError("length must be greater than or equal to 0")
    if length == 0:
        return 0
    length = min(length, len(str1), len(str2))
    left, right = str1[:length], str2[:length]
    return (left > right) - (left < right)