"""Parse the directive that follows a ``%`` in a format string."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

_FLAG_CHARS = "-+ 0#"
_WHITESPACE = " \t\n\v\f\r"
_UINT_MASK = 0xFFFFFFFF


class Conversion(Enum):
    """The conversion characters the formatter understands."""

    PERCENT = "%"
    CHAR = "c"
    STRING = "s"
    POINTER = "p"
    DECIMAL = "d"
    INTEGER = "i"
    UNSIGNED = "u"
    HEX = "x"
    HEX_UPPER = "X"


_CONVERSIONS = {member.value: member for member in Conversion}


@dataclass
class FormatSpec:
    """Everything a single ``%`` directive asks for.

    ``consumed`` is the number of characters of the directive after the
    ``%``; the conversion character always counts, even when it is missing
    or unknown, in which case ``conversion`` is None.
    """

    left: bool = False
    plus: bool = False
    space: bool = False
    zero_pad: bool = False
    alternate: bool = False
    width: Optional[int] = None
    precision: Optional[int] = None
    length_modifier: Optional[str] = None
    conversion: Optional[Conversion] = None
    consumed: int = 0

    @property
    def pad_char(self) -> str:
        """The character used to fill the width on the left."""
        return "0" if self.zero_pad else " "


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def leading_int(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit C int.

    Leading whitespace and one sign are skipped; text without a digit after
    them gives 0.
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
        if not _is_digit(char):
            break
        value = (value * 10 + ord(char) - ord("0")) & _UINT_MASK
    return _to_int32(-value if negative else value)


def _take_int(args: Iterator[object]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise ValueError("not enough arguments for '*'") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("'*' requires an integer argument")
    return _to_int32(value)


def _skip_digits(text: str, pos: int) -> int:
    while pos < len(text) and _is_digit(text[pos]):
        pos += 1
    return pos


def parse_spec(text: str, args: Iterator[object]) -> FormatSpec:
    """Parse the directive at the start of *text* (the part after ``%``).

    A ``*`` width or precision takes the next value from the iterator *args*.
    """
    spec = FormatSpec()
    pos = 0

    while pos < len(text) and text[pos] in _FLAG_CHARS:
        char = text[pos]
        if char == "-":
            spec.left = True
        elif char == "+":
            spec.plus = True
        elif char == " ":
            spec.space = True
        elif char == "0":
            spec.zero_pad = True
        else:
            spec.alternate = True
        pos += 1

    width: Optional[int] = None
    if pos < len(text) and _is_digit(text[pos]):
        width = leading_int(text[pos:])
        pos = _skip_digits(text, pos)
    elif pos < len(text) and text[pos] == "*":
        width = _take_int(args)
        pos += 1

    if pos < len(text) and text[pos] == ".":
        pos += 1
        if pos < len(text) and text[pos] == "*":
            precision = _take_int(args)
            pos += 1
        else:
            precision = leading_int(text[pos:])
            pos = _skip_digits(text, pos)
        spec.precision = precision if precision >= 0 else None

    for modifier in ("ll", "hh", "l", "h"):
        if text.startswith(modifier, pos):
            spec.length_modifier = modifier
            pos += len(modifier)
            break

    spec.conversion = _CONVERSIONS.get(text[pos]) if pos < len(text) else None
    pos += 1
    spec.consumed = pos

    if width is None or width == -1:
        spec.left = True
        spec.width = None
    elif width < 0:
        spec.left = True
        spec.width = -width
    else:
        spec.width = width
    return spec