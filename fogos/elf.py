"""ELF executable file and program headers."""

from __future__ import annotations

import struct
from dataclasses import dataclass

ELF_MAGIC = 0x464C457F  # "\x7FELF" little endian

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4

_ELFHDR = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROGHDR = struct.Struct("<IIQQQQQQ")

ELF_HEADER_SIZE = _ELFHDR.size
PROGHDR_SIZE = _PROGHDR.size


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a valid ELF structure."""


def _pack(layout: struct.Struct, *values: int | bytes) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"field out of range: {exc}") from exc


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header."""

    magic: int = ELF_MAGIC
    elf: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    def __post_init__(self) -> None:
        if len(self.elf) != 12:
            raise ValueError("elf identification must be 12 bytes")

    def pack(self) -> bytes:
        """Encode the header in its file layout."""
        return _pack(
            _ELFHDR,
            self.magic,
            bytes(self.elf),
            self.type,
            self.machine,
            self.version,
            self.entry,
            self.phoff,
            self.shoff,
            self.flags,
            self.ehsize,
            self.phentsize,
            self.phnum,
            self.shentsize,
            self.shnum,
            self.shstrndx,
        )


@dataclass(frozen=True)
class ProgramHeader:
    """One program segment header."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    def pack(self) -> bytes:
        """Encode the header in its file layout."""
        return _pack(
            _PROGHDR,
            self.type,
            self.flags,
            self.off,
            self.vaddr,
            self.paddr,
            self.filesz,
            self.memsz,
            self.align,
        )

    def is_loadable(self) -> bool:
        """True for segments that are loaded into memory."""
        return self.type == ELF_PROG_LOAD


def parse_elf_header(data: bytes) -> ElfHeader:
    """Decode and validate the ELF header at the start of ``data``."""
    if len(data) < ELF_HEADER_SIZE:
        raise ElfFormatError("truncated ELF header")
    fields = _ELFHDR.unpack_from(data)
    if fields[0] != ELF_MAGIC:
        raise ElfFormatError("bad ELF magic")
    return ElfHeader(*fields)


def parse_program_header(data: bytes, offset: int) -> ProgramHeader:
    """Decode the program header found at ``offset`` in ``data``."""
    if offset < 0 or offset + PROGHDR_SIZE > len(data):
        raise ElfFormatError(f"program header at {offset} lies outside the file")
    return ProgramHeader(*_PROGHDR.unpack_from(data, offset))


def program_headers(data: bytes, header: ElfHeader) -> list[ProgramHeader]:
    """All program headers that ``header`` describes."""
    return [
        parse_program_header(data, header.phoff + i * PROGHDR_SIZE)
        for i in range(header.phnum)
    ]