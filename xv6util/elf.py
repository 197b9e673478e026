"""ELF64 file header and program header records."""

import struct
from dataclasses import dataclass
from typing import ClassVar

ELF_MAGIC = 0x464C457F  # "\x7FELF" little endian

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4


class ElfFormatError(ValueError):
    """Raised when bytes cannot hold an ELF structure."""


def _unpack(layout, data, what, offset=0):
    if offset < 0 or len(data) - offset < layout.size:
        raise ElfFormatError(f"{what}: need {layout.size} bytes at offset {offset}")
    return layout.unpack_from(data, offset)


@dataclass
class ElfHeader:
    """ELF file header."""

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

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<I12sHHIQQQIHHHHHH")
    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data):
        """Parse a header from the start of ``data``."""
        return cls(*_unpack(cls._LAYOUT, data, "ELF header"))

    def is_valid(self):
        """True if the magic number is the ELF magic."""
        return self.magic == ELF_MAGIC

    def to_bytes(self):
        """Serialise the header."""
        return self._LAYOUT.pack(
            self.magic, self.elf, self.type, self.machine, self.version,
            self.entry, self.phoff, self.shoff, self.flags, self.ehsize,
            self.phentsize, self.phnum, self.shentsize, self.shnum, self.shstrndx,
        )


@dataclass
class ProgramHeader:
    """ELF program section header."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<IIQQQQQQ")
    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data):
        """Parse a program header from the start of ``data``."""
        return cls(*_unpack(cls._LAYOUT, data, "program header"))

    def to_bytes(self):
        """Serialise the program header."""
        return self._LAYOUT.pack(
            self.type, self.flags, self.off, self.vaddr,
            self.paddr, self.filesz, self.memsz, self.align,
        )


def read_program_headers(data, header):
    """Return the program headers that ``header`` describes within ``data``."""
    return [
        ProgramHeader(
            *_unpack(
                ProgramHeader._LAYOUT, data, "program header",
                header.phoff + i * header.phentsize,
            )
        )
        for i in range(header.phnum)
    ]