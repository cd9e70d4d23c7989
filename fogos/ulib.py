"""Small string and line-reading helpers used by the user programs."""

from __future__ import annotations

from typing import TextIO

_LINE_ENDS = ("\n", "\r")


def atoi(s: str) -> int:
    """Value of the leading decimal digits of ``s``; 0 when there are none.

    Signs and leading blanks are not understood.
    """
    n = 0
    for ch in s:
        if not "0" <= ch <= "9":
            break
        n = n * 10 + (ord(ch) - ord("0"))
    return n


def _as_bytes(s: str | bytes) -> bytes:
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    nul = data.find(b"\0")
    return data if nul < 0 else data[:nul]


def strcmp(p: str | bytes, q: str | bytes) -> int:
    """Compare two strings byte by byte.

    Returns the difference of the first differing bytes (the end of a
    string counting as 0), so the result is zero, negative or positive.
    """
    a = _as_bytes(p)
    b = _as_bytes(q)
    for x, y in zip(a, b):
        if x != y:
            return x - y
    if len(a) == len(b):
        return 0
    return (a[len(b)] if len(a) > len(b) else 0) - (b[len(a)] if len(b) > len(a) else 0)


def fgets(stream: TextIO, max: int) -> str:  # noqa: A002 - mirrors the familiar name
    """Read at most ``max - 1`` characters, stopping after a newline or carriage return."""
    chars: list[str] = []
    while len(chars) + 1 < max:
        c = stream.read(1)
        if not c:
            break
        chars.append(c)
        if c in _LINE_ENDS:
            break
    return "".join(chars)


def getline(stream: TextIO) -> str:
    """Read one whole line, newline included; an empty string means end of input.

    A carriage return does not end the line; reading goes on to the newline.
    """
    parts: list[str] = []
    while True:
        chunk = fgets(stream, 1 << 16)
        if not chunk:
            break
        parts.append(chunk)
        if chunk.endswith("\n"):
            break
    return "".join(parts)