"""RISC-V Sv39 paging constants, kernel parameters and address helpers."""

MASK64 = (1 << 64) - 1

# Kernel parameters.
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
FSSIZE = 1000
MAXPATH = 128

# Machine status register.
MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

# Supervisor status register.
SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

# Supervisor interrupt enable.
SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1

# Machine-mode interrupt enable.
MIE_MEIE = 1 << 11
MIE_MTIE = 1 << 7
MIE_MSIE = 1 << 3

SATP_SV39 = 8 << 60

PGSIZE = 4096
PGSHIFT = 12

PTE_V = 1 << 0
PTE_R = 1 << 1
PTE_W = 1 << 2
PTE_X = 1 << 3
PTE_U = 1 << 4

PXMASK = 0x1FF

# One beyond the highest usable virtual address (one bit below Sv39's limit).
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)


def pg_round_up(sz):
    """Round ``sz`` up to a page boundary."""
    return (sz + PGSIZE - 1) & ~(PGSIZE - 1) & MASK64


def pg_round_down(a):
    """Round ``a`` down to a page boundary."""
    return a & ~(PGSIZE - 1) & MASK64


def pa2pte(pa):
    """Shift a physical address into the PPN field of a PTE."""
    return ((pa & MASK64) >> 12) << 10


def pte2pa(pte):
    """Extract the physical address a PTE refers to."""
    return (((pte & MASK64) >> 10) << 12) & MASK64


def pte_flags(pte):
    """Return the low ten flag bits of a PTE."""
    return pte & 0x3FF


def _pxshift(level):
    return PGSHIFT + 9 * level


def px(level, va):
    """Return the 9-bit page-table index of ``va`` at ``level`` (0..2)."""
    return ((va & MASK64) >> _pxshift(level)) & PXMASK


def make_satp(pagetable):
    """Build a satp value selecting Sv39 with the given root table."""
    return SATP_SV39 | ((pagetable & MASK64) >> 12)