"""Simple grep supporting only the ^ . * $ operators."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

_BUFSIZE = 1024


def match(re: str, text: str) -> bool:
    """True if ``re`` matches anywhere in ``text``."""
    if re.startswith("^"):
        return _matchhere(re[1:], text)
    return any(_matchhere(re, text[start:]) for start in range(len(text) + 1))


def _matchhere(re: str, text: str) -> bool:
    if not re:
        return True
    if len(re) > 1 and re[1] == "*":
        return _matchstar(re[0], re[2:], text)
    if re == "$":
        return text == ""
    if text and (re[0] == "." or re[0] == text[0]):
        return _matchhere(re[1:], text[1:])
    return False


def _matchstar(c: str, re: str, text: str) -> bool:
    i = 0
    while True:
        if _matchhere(re, text[i:]):
            return True
        if i < len(text) and (text[i] == c or c == "."):
            i += 1
            continue
        return False


def grep(pattern: str, stream: TextIO, out: TextIO) -> None:
    """Write every newline-terminated line of ``stream`` that matches ``pattern``.

    A final line without a newline is not examined, and reading stops once an
    unterminated line fills the whole line buffer.
    """
    pending = ""
    while True:
        room = _BUFSIZE - 1 - len(pending)
        if room <= 0:
            break
        data = stream.read(room)
        if not data:
            break
        pending += data
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                out.write(line + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run grep over the named files or standard input; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, *files = args
    if not files:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for name in files:
        try:
            f = open(name, encoding="utf-8", errors="surrogateescape", newline="")
        except OSError:
            sys.stdout.write(f"grep: cannot open {name}\n")
            return 1
        with f:
            grep(pattern, f, sys.stdout)
    return 0