"""Padding, repeating and chunking strings."""

from enum import IntEnum

__all__ = ["PadType", "str_pad", "str_repeat", "chunk_split"]

_DEFAULT_CHUNK_LENGTH = 76
_DEFAULT_CHUNK_END = "\r\n"


class PadType(IntEnum):
    """Where :func:`str_pad` adds padding."""

    LEFT = 0
    RIGHT = 1
    BOTH = 2


def _cycle(pad_string: str, count: int) -> str:
    if count <= 0:
        return ""
    if not pad_string:
        raise ValueError("pad_string must not be empty")
    repeats = count // len(pad_string) + 1
    return (pad_string * repeats)[:count]


def str_pad(text: str, pad_length: int, pad_string: str, pad_type: int) -> str:
    """Pad ``text`` to ``pad_length`` characters with repetitions of ``pad_string``.

    An unknown ``pad_type`` leaves ``text`` unchanged. For :attr:`PadType.BOTH`
    the right side gets the extra character when the padding is odd.
    """
    missing = pad_length - len(text)
    if pad_length <= 0 or missing <= 0:
        return text

    if pad_type == PadType.RIGHT:
        left, right = 0, missing
    elif pad_type == PadType.LEFT:
        left, right = missing, 0
    elif pad_type == PadType.BOTH:
        left = missing // 2
        right = missing - left
    else:
        return text

    return _cycle(pad_string, left) + text + _cycle(pad_string, right)


def str_repeat(text: str, multiplier: int) -> str:
    """Return ``text`` repeated ``multiplier`` times; empty for non-positive counts."""
    if multiplier <= 0:
        return ""
    return text * multiplier


def chunk_split(body: str, chunk_length: int, end: str) -> str:
    """Split ``body`` into chunks of ``chunk_length``, each followed by ``end``.

    A zero length means 76 and an empty ``end`` means CRLF.
    """
    if chunk_length < 0:
        raise ValueError("chunk_length must not be negative")
    end = end or _DEFAULT_CHUNK_END
    chunk_length = chunk_length or _DEFAULT_CHUNK_LENGTH

    if len(body) <= 1 or len(body) < chunk_length:
        return body + end
    return "".join(
        body[start : start + chunk_length] + end
        for start in range(0, len(body), chunk_length)
    )