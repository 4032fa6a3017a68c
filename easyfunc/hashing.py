"""Checksums and digests of text."""

import hashlib
import zlib

__all__ = ["crc32", "md5"]


def _as_bytes(text: str | bytes) -> bytes:
    return text if isinstance(text, bytes) else text.encode("utf-8")


def crc32(text: str | bytes) -> int:
    """Return the IEEE CRC-32 checksum of ``text`` as an unsigned integer."""
    return zlib.crc32(_as_bytes(text)) & 0xFFFFFFFF


def md5(text: str | bytes) -> str:
    """Return the MD5 digest of ``text`` as a lower-case hex string."""
    return hashlib.md5(_as_bytes(text)).hexdigest()