"""System-wide limits, open flags, file types and the stat record."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

NPROC = 64
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 1
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 2000
MAXPATH = 128

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF


class FileType(enum.IntEnum):
    """Kinds of inode."""

    DIR = 1
    FILE = 2
    DEVICE = 3


class OpenFlag(enum.IntFlag):
    """Flags accepted by open."""

    RDONLY = 0x000
    WRONLY = 0x001
    RDWR = 0x002
    CREATE = 0x200
    TRUNC = 0x400


# int dev, uint ino, short type, short nlink, 4 bytes of padding, uint64 size
_STAT = struct.Struct("<iIhh4xQ")
STAT_SIZE = _STAT.size


@dataclass
class Stat:
    """Metadata of a file as reported by fstat."""

    dev: int = 0
    ino: int = 0
    type: int = 0
    nlink: int = 0
    size: int = 0

    def pack(self) -> bytes:
        """Encode the record in its on-wire layout."""
        try:
            return _STAT.pack(
                int(self.dev), int(self.ino), int(self.type), int(self.nlink), int(self.size)
            )
        except struct.error as exc:
            raise ValueError(f"stat field out of range: {exc}") from exc


def unpack_stat(data: bytes) -> Stat:
    """Decode a stat record from the start of ``data``."""
    if len(data) < STAT_SIZE:
        raise ValueError(f"stat record needs {STAT_SIZE} bytes, got {len(data)}")
    dev, ino, type_, nlink, size = _STAT.unpack_from(data)
    try:
        kind: int = FileType(type_)
    except ValueError:
        kind = type_
    return Stat(dev=dev, ino=ino, type=kind, nlink=nlink, size=size)