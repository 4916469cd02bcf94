"""Small string helpers used to parse command lines and environment values."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \n\t\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer with two's complement wrap."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces.

    An empty separator yields the whole text as one word, or no words at all
    when the text itself is empty.
    """
    if len(sep) > 1:
        raise ValueError("separator must be a single character")
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit.  Text without digits gives 0.  The result
    wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = _wrap_int(value * 10 + (ord(char) - ord("0")))
    return _wrap_int(-value if negative else value)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or None.  An empty needle matches
    at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    a missing character counting as code 0, or 0 when they agree.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    pairs = zip_longest(first[:count], second[:count], fillvalue="\0")
    for left, right in pairs:
        if left != right:
            return ord(left) - ord(right)
    return 0