"""Turn one parsed ``%`` directive and its argument into output text."""

from __future__ import annotations

from typing import Optional, Union

from .formatspec import Conversion, FormatSpec

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"

_INTEGER_CONVERSIONS = frozenset(
    {
        Conversion.DECIMAL,
        Conversion.INTEGER,
        Conversion.UNSIGNED,
        Conversion.HEX,
        Conversion.HEX_UPPER,
    }
)


def _width(spec: FormatSpec) -> int:
    return spec.width if spec.width is not None else -1


def _precision(spec: FormatSpec) -> int:
    return spec.precision if spec.precision is not None else -1


def _require_int(value: object) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return int(value)


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def to_hex(value: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative *value*."""
    if value < 0:
        raise ValueError("value must not be negative")
    return format(value, "X" if upper else "x")


def render_char(spec: FormatSpec, value: Union[int, str]) -> str:
    """Render a ``%c`` directive; an integer is taken as a byte value."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character argument must be a single character")
        char = value
    else:
        char = chr(_require_int(value) & 0xFF)
    padding = " " * max(_width(spec) - 1, 0)
    return char + padding if spec.left else padding + char


def render_string(spec: FormatSpec, value: Optional[str]) -> str:
    """Render a ``%s`` directive; None prints as ``(null)``."""
    if value is None:
        value = _NULL_STRING
    elif not isinstance(value, str):
        raise TypeError(f"expected a string argument, got {type(value).__name__}")
    precision = _precision(spec)
    if precision < 0 or precision > len(value):
        precision = len(value)
    shown = value[:precision]
    padding = " " * max(_width(spec) - precision, 0)
    return shown + padding if spec.left else padding + shown


def _integer_digits(spec: FormatSpec, value: int) -> str:
    conversion = spec.conversion
    if conversion in (Conversion.DECIMAL, Conversion.INTEGER):
        return str(_to_int32(value))
    if conversion is Conversion.UNSIGNED:
        return str(value & _UINT_MASK)
    return to_hex(value & _UINT_MASK, upper=conversion is Conversion.HEX_UPPER)


def render_integer(spec: FormatSpec, value: int) -> str:
    """Render a ``%d``, ``%i``, ``%u``, ``%x`` or ``%X`` directive."""
    if spec.conversion not in _INTEGER_CONVERSIONS:
        raise ValueError(f"not an integer conversion: {spec.conversion}")
    text = _integer_digits(spec, _require_int(value))
    width = _width(spec)
    precision = _precision(spec)

    if text == "0" and precision == 0:
        return " " * max(width, 0)

    negative = text.startswith("-")
    sign = "-" if negative else ""
    digits = text[1:] if negative else text

    if spec.left:
        body = sign + "0" * max(precision - len(digits), 0) + digits
        return body + " " * max(width - len(body), 0)

    if precision < 0:
        if negative and spec.zero_pad:
            return sign + "0" * max(width - 1 - len(digits), 0) + digits
        return spec.pad_char * max(width - len(text), 0) + text

    padding = " " * max(width - max(precision + len(sign), len(text)), 0)
    zeros = "0" * max(precision - len(digits), 0)
    return padding + sign + zeros + digits


def render_pointer(spec: FormatSpec, value: Optional[int]) -> str:
    """Render a ``%p`` directive as ``0x`` followed by lowercase hex digits."""
    address = 0 if value is None else _require_int(value) & _POINTER_MASK
    digits = to_hex(address)
    precision = _precision(spec)
    if digits == "0" and precision == 0:
        digits = ""
    width = _width(spec) - 2
    zeros = "0" * max(precision - len(digits), 0)

    if spec.left:
        body = zeros + digits
        return "0x" + body + " " * max(width - len(body), 0)

    padding = " " * max(width - max(precision, len(digits)), 0)
    return padding + "0x" + zeros + digits


def render_percent(spec: FormatSpec) -> str:
    """Render a literal percent sign padded to the directive's width."""
    count = max(_width(spec) - 1, 0)
    if spec.left:
        return "%" + " " * count
    return spec.pad_char * count + "%"