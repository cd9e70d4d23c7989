"""cat, echo and wc."""

from __future__ import annotations

import sys
from typing import BinaryIO, Sequence, TextIO

_BUFSIZE = 512
_WHITESPACE = b" \r\t\n\v\0"


def cat(stream: BinaryIO, out: BinaryIO) -> None:
    """Copy ``stream`` to ``out``; raises OSError on a read or short write."""
    while True:
        try:
            chunk = stream.read(_BUFSIZE)
        except OSError as exc:
            raise OSError("read error") from exc
        if not chunk:
            return
        try:
            written = out.write(chunk)
        except OSError as exc:
            raise OSError("write error") from exc
        if written is not None and written != len(chunk):
            raise OSError("write error")


def echo(words: Sequence[str], out: TextIO) -> None:
    """Write the words separated by spaces and ended by a newline."""
    if words:
        out.write(" ".join(words) + "\n")


def wc(stream: BinaryIO) -> tuple[int, int, int]:
    """Count (lines, words, bytes) in ``stream``."""
    lines = words = chars = 0
    inword = False
    while chunk := stream.read(_BUFSIZE):
        for byte in chunk:
            chars += 1
            if byte == 0x0A:
                lines += 1
            if byte in _WHITESPACE:
                inword = False
            elif not inword:
                words += 1
                inword = True
    return lines, words, chars


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def cat_main(argv: Sequence[str] | None = None) -> int:
    """Concatenate the named files, or standard input, to standard output."""
    args = _args(argv)
    out = sys.stdout.buffer
    try:
        if not args:
            cat(sys.stdin.buffer, out)
            return 0
        for name in args:
            try:
                f = open(name, "rb")
            except OSError:
                sys.stderr.write(f"cat: cannot open {name}\n")
                return 1
            with f:
                cat(f, out)
    except OSError as exc:
        sys.stderr.write(f"cat: {exc}\n")
        return 1
    return 0


def echo_main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments."""
    echo(_args(argv), sys.stdout)
    return 0


def wc_main(argv: Sequence[str] | None = None) -> int:
    """Print line, word and byte counts for each file or for standard input."""
    args = _args(argv)
    sources = [(None, "")] if not args else [(name, name) for name in args]
    for path, label in sources:
        try:
            if path is None:
                counts = wc(sys.stdin.buffer)
            else:
                try:
                    f = open(path, "rb")
                except OSError:
                    sys.stdout.write(f"wc: cannot open {path}\n")
                    return 1
                with f:
                    counts = wc(f)
        except OSError:
            sys.stdout.write("wc: read error\n")
            return 1
        lines, words, chars = counts
        sys.stdout.write(f"{lines} {words} {chars} {label}\n")
    return 0