# xv6util

Pure-Python models of pieces of a small RISC-V teaching kernel and its user
programs: Sv39 paging constants and address arithmetic, ELF header records,
the user-level `printf`, the K&R free-list `malloc`, a tiny
regular-expression `grep`, the shell's command-line parser and the
Park–Miller random number generator.

Everything runs on plain Python 3.10 or later with no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command

```
xv6-grep PATTERN [FILE ...]
```

Prints each newline-terminated line of the named files (or standard input)
that matches `PATTERN`. The pattern language understands only `^`, `.`,
`*` and `$`. With no pattern it prints a usage line to standard error and
exits with status 1; a file that cannot be opened is reported on standard
output and also ends the run with status 1.

## Library

### Paging arithmetic — `xv6util.riscv`

Kernel parameters (`NPROC`, `MAXARG`, `MAXPATH`, ...), status-register
bits, page-table-entry flags (`PTE_V`, `PTE_R`, `PTE_W`, `PTE_X`, `PTE_U`),
`PGSIZE` and `MAXVA`, plus helpers:

```python
from xv6util.riscv import pg_round_up, pg_round_down, pa2pte, pte2pa, pte_flags, px, make_satp

pg_round_up(4097)        # 8192
pg_round_down(8191)      # 4096
px(2, 0x40000000)        # 1
pte2pa(pa2pte(0x80001000))  # 0x80001000
```

### ELF headers — `xv6util.elf`

`ElfHeader` and `ProgramHeader` are dataclasses with `from_bytes` and
`to_bytes`; `ElfHeader.is_valid()` checks the magic number, and
`read_program_headers(data, header)` returns the program headers the file
header describes. Too few bytes raise `ElfFormatError`.

```python
from xv6util.elf import ElfHeader, read_program_headers

header = ElfHeader.from_bytes(data)
if header.is_valid():
    for ph in read_program_headers(data, header):
        print(ph.vaddr, ph.memsz)
```

### Formatting — `xv6util.printf`

`format_string(fmt, *args)` understands `%d`, `%l`, `%x`, `%p`, `%s`,
`%c` and `%%`; integers are treated as 32-bit values and an unknown
conversion is printed as is. `fprintf(stream, fmt, *args)` and
`printf(fmt, *args)` write the result.

```python
from xv6util.printf import format_string

format_string("%d %x %s", -5, 255, "ok")   # "-5 FF ok"
```

### Matching — `xv6util.grep`

`match(re, text)`, `matchhere(re, text)` and `matchstar(c, re, text)` are
the matcher; `grep(pattern, stream, out)` filters lines; `main(argv=None)`
is the command above.

```python
from xv6util.grep import match

match("^ab*c$", "abbbc")   # True
```

### Shell parsing — `xv6util.sh`

`parse_cmd(s)` returns a tree of `ExecCmd`, `RedirCmd`, `PipeCmd`,
`ListCmd` and `BackCmd` dataclasses and raises `ShellSyntaxError` on
malformed input, including more than nine words in one command.

```python
from xv6util.sh import parse_cmd

cmd = parse_cmd("cat < in | grep x > out; echo done &")
```

### Allocation — `xv6util.umalloc`

`Heap(limit)` is a simulated first-fit allocator. `malloc(nbytes)` returns
an address, `free(address)` returns it to the free list (an address that
was not allocated raises `ValueError`), `sbrk(nunits)` grows the heap, and
`free_blocks()` lists the free blocks. Exhausting `limit` raises
`MemoryError`.

### Random numbers — `xv6util.rand`

`do_rand(ctx)` computes the next minimal-standard value from a state;
`ParkMiller(seed=1)` is an endless iterator over that sequence.

## What this package does not do

The package provides paging arithmetic only: it has no simulated physical
memory or page tables to map, copy or free. The shell support parses
command lines but does not run them, and `xv6-grep` is the only command;
there are no file utilities such as `cat`, `ls` or `wc`, no `xargs` and no
prime sieve.