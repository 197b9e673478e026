"""Models of a small RISC-V teaching kernel's paging arithmetic, ELF headers and user library."""

__version__ = "0.1.0"