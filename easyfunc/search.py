"""Finding substrings and characters inside strings."""

__all__ = ["strchr", "strstr", "strrchr", "strpos", "strpbrk", "strcspn"]


def _split_at(haystack: str, idx: int, before_needle: bool) -> str:
    if idx == -1:
        return ""
    return haystack[:idx] if before_needle else haystack[idx:]


def strchr(haystack: str, needle: str, before_needle: bool) -> str:
    """Return ``haystack`` from the first ``needle`` on, or the part before it.

    Gives an empty string when either argument is empty or ``needle`` is absent.
    """
    if not haystack or not needle:
        return ""
    return _split_at(haystack, haystack.find(needle), before_needle)


def strstr(haystack: str, needle: str, before_needle: bool) -> str:
    """Return ``haystack`` from the first ``needle`` on, or the part before it.

    Gives an empty string when ``needle`` is empty or absent.
    """
    if not needle:
        return ""
    return _split_at(haystack, haystack.find(needle), before_needle)


def strrchr(char: str, haystack: str) -> str:
    """Return ``haystack`` from the last occurrence of ``char``, or ``""``."""
    if len(char) != 1:
        raise ValueError("char must be a single character")
    idx = haystack.rfind(char)
    return haystack[idx:] if idx != -1 else ""


def strpos(haystack: str, needle: str, offset: int) -> int:
    """Return the position of ``needle`` in ``haystack``, or -1 if absent.

    A positive ``offset`` starts the search there; the result is still counted
    from the start of ``haystack``. A negative ``offset`` does not move the
    search but is added to a found position.
    """
    if offset > len(haystack):
        raise ValueError("offset is past the end of haystack")
    searched = haystack[offset:] if offset > 0 else haystack
    idx = searched.find(needle)
    if idx == -1:
        return -1
    return idx + offset


def strpbrk(haystack: str, char_list: str) -> str | None:
    """Return ``haystack`` from the first occurrence of ``char_list`` on.

    Returns None when ``char_list`` is empty or does not occur.
    """
    if not char_list:
        return None
    idx = haystack.find(char_list)
    if idx == -1:
        return None
    return haystack[idx:]


def strcspn(text: str, chars: str, offset: int, length: int) -> int:
    """Length of the leading part of a slice of ``text`` holding none of ``chars``.

    The slice starts at ``offset`` (negative counts from the end) and spans
    ``length`` characters (negative stops that many before the end).
    """
    size = len(text)
    if offset >= size:
        return 0
    if offset < 0:
        offset += size
        if offset < 0:
            raise ValueError("offset is before the start of text")
    if length < 0:
        length = size + length - offset
    if length <= 0:
        return 0

    segment = text[offset : min(offset + length, size)]
    return next(
        (pos for pos, ch in enumerate(segment) if ch in chars),
        len(segment),
    )