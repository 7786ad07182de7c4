"""Byte-buffer primitives with C-library semantics.

Buffers are ``bytes`` for reading and ``bytearray`` for writing.  Functions
that locate a byte return an index rather than a pointer.  Requests that
would reach past the end of a buffer raise ``ValueError`` instead of
touching memory they do not own.
"""

from __future__ import annotations

__all__ = [
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "memset",
    "bzero",
    "calloc",
    "strlcpy",
    "strlcat",
]


def _check_count(n: int, *buffers: bytes | bytearray) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def _strlen(buf: bytes | bytearray) -> int:
    """Length up to the first NUL byte, or the whole buffer if there is none."""
    end = buf.find(0)
    return len(buf) if end < 0 else end


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) in ``data[:n]``."""
    _check_count(n, data)
    pos = data.find(c & 0xFF, 0, n)
    return pos if pos >= 0 else None


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, or 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``dest`` from ``src_offset`` to ``dest_offset``.

    Overlapping regions are handled correctly.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dest_offset, src_offset) + n > len(dest):
        raise ValueError("region reaches past the end of the buffer")
    dest[dest_offset:dest_offset + n] = bytes(dest[src_offset:src_offset + n])
    return dest


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` modulo 256 and return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy the string in ``src`` into ``dst``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive.  Returns
    the length of the source string so truncation can be detected.
    """
    src_len = _strlen(src)
    if size <= 0:
        return src_len
    copied = min(src_len, size - 1)
    if copied + 1 > len(dst):
        raise ValueError("destination buffer is too small")
    dst[:copied] = src[:copied]
    dst[copied] = 0
    return src_len


def strlcat(dst: bytearray | None, src: bytes | bytearray, size: int) -> int:
    """Append the string in ``src`` to the string in ``dst``.

    ``size`` is the full capacity allowed for ``dst``, terminator included.
    Returns the length the combined string would have had; when ``size`` is
    not larger than the current string, returns ``size`` plus the source
    length and leaves ``dst`` untouched.
    """
    if dst is None and size == 0:
        return 0
    if dst is None:
        raise ValueError("destination buffer is missing")
    src_len = _strlen(src)
    dst_len = _strlen(dst)
    if size <= dst_len:
        return size + src_len
    copied = min(src_len, size - dst_len - 1)
    if dst_len + copied + 1 > len(dst):
        raise ValueError("destination buffer is too small")
    dst[dst_len:dst_len + copied] = src[:copied]
    dst[dst_len + copied] = 0
    return src_len + dst_len