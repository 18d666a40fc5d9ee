"""String helpers with the shell's C-library semantics."""

from __future__ import annotations

from itertools import zip_longest
from typing import IO, AnyStr, Iterator

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit int; 0 if none."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-") and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + int(ch)
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of *charset* from both ends of *text*."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from *start*; '' past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of *needle* in the first *length* characters of *haystack*, or None."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def _compare(a: str, b: str) -> int:
    for left, right in zip_longest(a, b, fillvalue=""):
        if left != right:
            return (ord(left) if left else 0) - (ord(right) if right else 0)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters; negative, zero or positive."""
    if n <= 0:
        return 0
    return _compare(a[:n], b[:n])


def strcmp(a: str, b: str) -> int:
    """Compare two strings; negative, zero or positive."""
    return _compare(a, b)


def strchr(text: str, char: str) -> int | None:
    """Index of the first *char* in *text*; '\\0' finds the end. None if absent."""
    index = text.find(char)
    if index >= 0:
        return index
    if char == "\0":
        return len(text)
    return None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last *char* in *text*; '\\0' finds the end. None if absent."""
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of *stream*, each with its newline if it had one."""
    yield from iter(stream.readline, stream.read(0))