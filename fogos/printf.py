"""Minimal formatted output understanding %d, %l, %x, %p, %s and %c."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, TextIO

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _convert(spec: str, take: Callable[[], Any]) -> str:
    if spec == "d":
        return str(_int32(operator.index(take())))
    if spec == "l":
        return str(operator.index(take()) & _MASK32)
    if spec == "x":
        return format(operator.index(take()) & _MASK32, "X")
    if spec == "p":
        return "0x" + format(operator.index(take()) & _MASK64, "016X")
    if spec == "s":
        s = take()
        return "(null)" if s is None else str(s)
    if spec == "c":
        c = take()
        if isinstance(c, str):
            if len(c) != 1:
                raise TypeError("%c requires a single character")
            return c
        return chr(operator.index(c) & 0xFF)
    if spec == "%":
        return "%"
    # Unknown sequence: print it to draw attention.
    return "%" + spec


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``; a lone trailing '%' is dropped."""
    values = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out: list[str] = []
    chars = iter(fmt)
    for c in chars:
        if c != "%":
            out.append(c)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, take))
    return "".join(out)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> None:
    """Write the formatted text to ``stream``."""
    stream.write(format_string(fmt, *args))


def printf(fmt: str, *args: Any) -> None:
    """Write the formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)