"""Small string helpers used to take command lines and format strings apart."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_UINT_MASK = 0xFFFFFFFF


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character of *text* found in *charset*."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit.  When the 32-bit accumulator is seen to wrap the result is 0,
    and the value returned is the 32-bit signed interpretation.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    for char in text[pos:]:
        if not "0" <= char <= "9":
            break
        following = (value * 10 + ord(char) - ord("0")) & _UINT_MASK
        if value > following:
            return 0
        value = following
    if negative:
        value = -value & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def find(haystack: str, needle: str, limit: int) -> int:
    """Return the index of *needle* in the first *limit* characters of *haystack*.

    An empty needle is found at 0; -1 means not found.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    return haystack.find(needle, 0, limit)