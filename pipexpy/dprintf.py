"""Format text with ``%`` directives and write it to a file descriptor."""

from __future__ import annotations

import os
from typing import Iterator

from .formatspec import Conversion, FormatSpec, parse_spec
from .render import (
    render_char,
    render_integer,
    render_percent,
    render_pointer,
    render_string,
)


class FormatError(ValueError):
    """Raised when a format string and its arguments cannot be rendered."""


def _next_arg(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise FormatError("not enough arguments for the format string") from None


def _render(spec: FormatSpec, args: Iterator[object]) -> str:
    conversion = spec.conversion
    if conversion is Conversion.PERCENT:
        return render_percent(spec)
    value = _next_arg(args)
    if conversion is Conversion.CHAR:
        return render_char(spec, value)  # type: ignore[arg-type]
    if conversion is Conversion.STRING:
        return render_string(spec, value)  # type: ignore[arg-type]
    if conversion is Conversion.POINTER:
        return render_pointer(spec, value)  # type: ignore[arg-type]
    return render_integer(spec, value)  # type: ignore[arg-type]


def format_text(fmt: str, *args: object) -> str:
    """Render *fmt* with *args* and return the resulting text.

    An unknown conversion prints a padded ``%`` and carries on with the text
    that follows it; a lone ``%`` at the very end is dropped.  A directive
    cut short by the end of the format raises :class:`FormatError`.
    """
    values = iter(args)
    pieces: list[str] = []
    pos = 0
    while pos < len(fmt):
        if fmt[pos] != "%":
            end = fmt.find("%", pos)
            if end == -1:
                end = len(fmt)
            pieces.append(fmt[pos:end])
            pos = end
            continue
        directive = fmt[pos + 1:]
        if not directive:
            break
        try:
            spec = parse_spec(directive, values)
        except ValueError as exc:
            raise FormatError(str(exc)) from exc
        if spec.consumed > len(directive):
            raise FormatError("format string ends inside a directive")
        if spec.conversion is None:
            pieces.append(render_percent(spec))
            pos += spec.width if spec.width and spec.width > 0 else 1
            continue
        pieces.append(_render(spec, values))
        pos += spec.consumed + 1
    return "".join(pieces)


def dprintf(fd: int, fmt: str, *args: object) -> int:
    """Write the rendered *fmt* to the file descriptor *fd*.

    Returns the number of bytes written.
    """
    data = format_text(fmt, *args).encode("utf-8")
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)