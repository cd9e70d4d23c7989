"""ln, mkdir and rm."""

from __future__ import annotations

import os
import sys
from typing import Sequence


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def ln_main(argv: Sequence[str] | None = None) -> int:
    """Create a hard link ``new`` to ``old``."""
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("Usage: ln old new\n")
        return 1
    old, new = args
    try:
        os.link(old, new)
    except OSError:
        sys.stderr.write(f"link {old} {new}: failed\n")
    return 0


def mkdir_main(argv: Sequence[str] | None = None) -> int:
    """Create each directory, stopping at the first failure."""
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: mkdir files...\n")
        return 1
    for name in args:
        try:
            os.mkdir(name)
        except OSError:
            sys.stderr.write(f"mkdir: {name} failed to create\n")
            break
    return 0


def _unlink(path: str) -> None:
    """Remove a file, or a directory if it is empty."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def rm_main(argv: Sequence[str] | None = None) -> int:
    """Remove each name, stopping at the first failure."""
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: rm files...\n")
        return 1
    for name in args:
        try:
            _unlink(name)
        except OSError:
            sys.stderr.write(f"rm: {name} failed to delete\n")
            break
    return 0