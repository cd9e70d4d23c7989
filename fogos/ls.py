"""ls with coloured output and a handful of listing styles."""

from __future__ import annotations

import enum
import os
import random
import stat as statmod
import sys
from typing import Sequence, TextIO

from fogos.params import FileType, Stat
from fogos.printf import format_string

DIRSIZ = 14
_BUFSIZE = 512


class Color(enum.IntEnum):
    """ANSI foreground colour codes."""

    BLACK = 30
    DARK_RED = 31
    DARK_GREEN = 32
    DARK_YELLOW = 33
    DARK_BLUE = 34
    DARK_MAGENTA = 35
    DARK_CYAN = 36
    LIGHT_GRAY = 37
    DARK_GRAY = 90
    RED = 91
    GREEN = 92
    ORANGE = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    WHITE = 97


_RAND_COLORS = (Color.BLUE, Color.RED, Color.GREEN, Color.MAGENTA, Color.ORANGE)
_FUN_COLORS = {
    1: Color.RED,
    2: Color.DARK_YELLOW,
    3: Color.ORANGE,
    4: Color.GREEN,
    5: Color.BLUE,
    0: Color.MAGENTA,
}
_TYPE_COLORS = {0: Color.GREEN, 1: Color.CYAN, 2: Color.WHITE, 3: Color.GREEN}

_HELP = (
    "LS MANUAL PAGE\n"
    "-------\n"
    "Flags:\n"
    "-t: prints based off type\n"
    "-sz: prints based off size\n"
    "-c: prints the files in a nice set of columns (ONLY FOR DIR)\n"
    "-fun: prints files in a fun set of colors (ONLY FOR DIR)\n"
    "-rand: prints files in random colors\n"
    "-i: prints the index of the file\n"
)

_PLAIN = "\033[%dm%s \033[0m\n"
_WITH_NUMBER = "\033[%dm%s %d\033[0m\n"


def fmtname(path: str) -> str:
    """Last path component, blank-padded to DIRSIZ unless already that long."""
    name = path.rsplit("/", 1)[-1]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def help_text() -> str:
    """The manual text printed for -h and for unknown flags."""
    return _HELP


def _stat(path: str) -> Stat:
    st = os.stat(path)
    if statmod.S_ISDIR(st.st_mode):
        kind = FileType.DIR
    elif statmod.S_ISREG(st.st_mode):
        kind = FileType.FILE
    else:
        kind = FileType.DEVICE
    return Stat(dev=st.st_dev, ino=st.st_ino, type=kind, nlink=st.st_nlink, size=st.st_size)


def _random_color() -> Color:
    return _RAND_COLORS[(random.getrandbits(31) // 1000000) % 5]


def _size_color(size: int) -> Color:
    if 0 < size <= 1000:
        return Color.BLUE
    if 1000 < size <= 10000:
        return Color.CYAN
    if 10000 < size <= 100000:
        return Color.MAGENTA
    if size == 0:
        return Color.WHITE
    return Color.GREEN


def ls(path: str, flag: str, out: TextIO) -> None:
    """List ``path`` to ``out`` in the style chosen by ``flag``.

    Directory entries are "." and ".." followed by the names in sorted order.
    """
    color = Color.CYAN
    valid = False

    def emit(fmt: str, *args: object) -> None:
        out.write(format_string(fmt, *args))

    try:
        st = _stat(path)
    except OSError:
        sys.stderr.write(f"ls: cannot open {path}\n")
        return

    if st.type in (FileType.FILE, FileType.DEVICE):
        name = fmtname(path)
        if flag == "-":
            valid = True
            emit(_PLAIN, color, name)
        elif flag == "-l":
            valid = True
            emit("\033[%dm%s %d %d %l\033[0m\n", color, name, st.type, st.ino, st.size)
        elif flag == "-sz":
            valid = True
            emit(_WITH_NUMBER, color, name, st.size)
        elif flag == "-t":
            valid = True
            emit(_WITH_NUMBER, color, name, st.type)
        elif flag == "-i":
            valid = True
            emit("\033[%dm%s %d \033[0m\n", color, name, st.ino)
        elif flag == "-rand":
            valid = True
            color = _random_color()
            emit(_PLAIN, color, name)
    elif len(path) + 1 + DIRSIZ + 1 > _BUFSIZE:
        emit("ls: path too long\n")
    else:
        try:
            names = [".", ".."] + sorted(os.listdir(path))
        except OSError:
            sys.stderr.write(f"ls: cannot open {path}\n")
            return
        for entry_name in names:
            entry = path + "/" + entry_name
            try:
                st = _stat(entry)
            except OSError:
                emit("ls: cannot stat %s\n", entry)
                continue
            name = fmtname(entry)
            if flag == "-sz":
                valid = True
                color = _size_color(st.size)
                emit(_WITH_NUMBER, color, name, st.size)
            elif flag == "-t":
                valid = True
                color = _TYPE_COLORS.get(int(st.type), color)
                emit(_WITH_NUMBER, color, name, st.type)
            elif flag == "-l":
                valid = True
                color = Color.WHITE
                emit("\033[%dm%s %d %d %d\033[0m\n", color, name, st.type, st.ino, st.size)
            elif flag == "-i":
                valid = True
                emit("\033[%dm%s %d \033[0m\n", color, name, st.ino)
            elif flag == "-fun":
                valid = True
                color = _FUN_COLORS[st.ino % 6]
                emit(_PLAIN, color, name)
            elif flag == "-c":
                valid = True
                emit("%s" if st.ino % 5 != 0 else "\n%s", name)
            elif flag == "-rand":
                valid = True
                color = _random_color()
                emit(_PLAIN, color, name)
            elif flag == "-":
                valid = True
                if st.type == FileType.DIR:
                    color = Color.BLUE
                    emit(_PLAIN, color, name)
                else:
                    emit("%s\n", name)

    if flag == "-c":
        emit("\n")
    if not valid:
        emit("Invalid Flag\n")
        out.write(help_text())


def main(argv: Sequence[str] | None = None) -> int:
    """List the named paths, or the current directory, with at most one flag."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if not args:
        ls(".", "-", out)
        return 0
    flags = [a for a in args if a.startswith("-")]
    if len(flags) >= 2:
        out.write("Too many flags detected. Please use one flag at a time\n")
        return 0
    flag = flags[-1] if flags else "-"
    if flag == "-h":
        out.write(help_text())
        return 0
    for arg in args:
        if not arg.startswith("-"):
            ls(arg, flag, out)
        elif len(args) == 1:
            ls(".", flag, out)
    return 0