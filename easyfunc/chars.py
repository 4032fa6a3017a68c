"""Conversions between single characters and their numeric codes."""

__all__ = ["ascii_char", "first_code"]

_REPLACEMENT_CHAR = "\ufffd"


def ascii_char(code: int) -> str:
    """Return the ASCII character for ``code``.

    Negative codes have 256 added once, and the result is reduced modulo 256
    with the sign of the dividend kept. Code 0 and codes above 127 give an
    empty string. A code that is still negative gives the replacement
    character.
    """
    if code < 0:
        code += 256
    # Remainder that keeps the sign of the dividend.
    code = code % 256 if code >= 0 else -((-code) % 256)

    if code == 0 or code > 127:
        return ""
    if code < 0:
        return _REPLACEMENT_CHAR
    return chr(code)


def first_code(text: str) -> int:
    """Return the code point of the first character of ``text``, or 0 if empty."""
    if not text:
        return 0
    return ord(text[0])