"""Reversing strings and capitalising words."""

__all__ = ["strrev", "ucwords"]


def strrev(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def _is_separator(ch: str) -> bool:
    if ch <= "\x7f":
        return not (ch.isascii() and (ch.isalnum() or ch == "_"))
    if ch.isalpha() or ch.isdigit():
        return False
    return ch.isspace()


def _title_char(ch: str) -> str:
    titled = ch.title()
    return titled if len(titled) == 1 else ch


def ucwords(text: str) -> str:
    """Upper-case the first letter of every word.

    A word starts after any character that is not a letter, a digit or ``_``.
    """
    out = []
    prev = " "
    for ch in text:
        out.append(_title_char(ch) if _is_separator(prev) else ch)
        prev = ch
    return "".join(out)