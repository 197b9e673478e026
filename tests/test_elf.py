import pytest

from xv6util.elf import (
    ELF_MAGIC,
    ELF_PROG_FLAG_EXEC,
    ELF_PROG_FLAG_READ,
    ELF_PROG_LOAD,
    ElfFormatError,
    ElfHeader,
    ProgramHeader,
    read_program_headers,
)


def test_header_wire_layout():
    raw = ElfHeader().to_bytes()
    assert raw[:4] == b"\x7fELF"
    assert len(raw) == 64


def test_header_round_trip():
    hdr = ElfHeader(elf=b"\x02\x01\x01" + bytes(9), type=2, machine=0xF3,
                    version=1, entry=0x1000, phoff=64, phentsize=56, phnum=3)
    parsed = ElfHeader.from_bytes(hdr.to_bytes())
    assert parsed == hdr
    assert parsed.is_valid()


def test_header_bad_magic():
    hdr = ElfHeader(magic=ELF_MAGIC ^ 1)
    assert not ElfHeader.from_bytes(hdr.to_bytes()).is_valid()


def test_header_too_short():
    with pytest.raises(ElfFormatError):
        ElfHeader.from_bytes(ElfHeader().to_bytes()[:-1])


def test_program_header_round_trip():
    ph = ProgramHeader(type=ELF_PROG_LOAD, flags=ELF_PROG_FLAG_READ | ELF_PROG_FLAG_EXEC,
                       off=0x1000, vaddr=0, filesz=100, memsz=200, align=4096)
    raw = ph.to_bytes()
    assert len(raw) == 56
    assert ProgramHeader.from_bytes(raw) == ph


def test_read_program_headers():
    ph1 = ProgramHeader(type=ELF_PROG_LOAD, off=0x1000, filesz=10, memsz=10)
    ph2 = ProgramHeader(type=ELF_PROG_LOAD, off=0x2000, vaddr=0x1000, filesz=5, memsz=8)
    hdr = ElfHeader(phoff=ElfHeader.SIZE, phentsize=ProgramHeader.SIZE, phnum=2)
    data = hdr.to_bytes() + ph1.to_bytes() + ph2.to_bytes()
    assert read_program_headers(data, hdr) == [ph1, ph2]


def test_read_program_headers_truncated():
    ph = ProgramHeader(type=ELF_PROG_LOAD)
    hdr = ElfHeader(phoff=ElfHeader.SIZE, phentsize=ProgramHeader.SIZE, phnum=2)
    data = hdr.to_bytes() + ph.to_bytes()
    with pytest.raises(ElfFormatError):
        read_program_headers(data, hdr)