"""Character classification and string helpers with C-library semantics.

Characters may be given either as one-character strings or as integer
code points.  Functions that locate something return an index into the
string (or ``None`` when nothing is found) rather than a pointer.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import zip_longest

__all__ = [
    "atoi",
    "itoa",
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "is_space",
    "to_lower",
    "to_upper",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strcmp",
    "strncmp",
    "strchr",
    "strrchr",
    "strmapi",
    "len_compare",
]

_ATOI_BLANKS = frozenset(" \t\n\v\f\r")
_SPACES = frozenset(" \f\n\r\t\v")


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading blanks and trailing junk.

    Returns 0 when no digits follow the optional sign.
    """
    rest = text.lstrip("".join(_ATOI_BLANKS))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(c: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for space, form feed, newline, carriage return and both tabs."""
    return _code(c) in {ord(s) for s in _SPACES}


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    return [piece for piece in text.split(_single_char(sep)) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty needle matches at 0.  Returns the index, or ``None``.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def _compare(a: str, b: str) -> int:
    for x, y in zip_longest(map(ord, a), map(ord, b), fillvalue=0):
        if x != y:
            return x - y
    return 0


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing characters, or 0 when equal.

    The end of the shorter string compares as character 0.
    """
    return _compare(a, b)


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n <= 0:
        return 0
    return _compare(a[:n], b[:n])


def strchr(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``.

    Searching for ``"\\0"`` finds the terminator at ``len(text)``.
    """
    if _single_char(c) == "\0":
        pos = text.find(c)
        return pos if pos >= 0 else len(text)
    pos = text.find(c)
    return pos if pos >= 0 else None


def strrchr(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``.

    Searching for ``"\\0"`` finds the terminator at ``len(text)``.
    """
    if _single_char(c) == "\0":
        return len(text)
    pos = text.rfind(c)
    return pos if pos >= 0 else None


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def len_compare(a: str | None, b: str | None) -> int:
    """Length of the longer string; ``None`` counts as empty."""
    return max(len(a or ""), len(b or ""))