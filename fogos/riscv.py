"""RISC-V Sv39 paging helpers and the physical memory layout."""

from __future__ import annotations

import enum

_MASK64 = (1 << 64) - 1


def _u64(x: int) -> int:
    return x & _MASK64


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

# Machine interrupt enable.
MIE_MEIE = 1 << 11
MIE_MTIE = 1 << 7
MIE_MSIE = 1 << 3

SATP_SV39 = 8 << 60

PGSIZE = 4096
PGSHIFT = 12

PXMASK = 0x1FF

MAXVA = 1 << (9 + 9 + 9 + 12 - 1)


class PteFlag(enum.IntFlag):
    """Page table entry permission bits."""

    V = 1 << 0
    R = 1 << 1
    W = 1 << 2
    X = 1 << 3
    U = 1 << 4


# Physical memory layout of the virt machine.
UART0 = 0x10000000
UART0_IRQ = 10
VIRTIO0 = 0x10001000
VIRTIO0_IRQ = 1
CLINT = 0x2000000
CLINT_MTIME = CLINT + 0xBFF8
PLIC = 0x0C000000
PLIC_PRIORITY = PLIC + 0x0
PLIC_PENDING = PLIC + 0x1000
KERNBASE = 0x80000000
PHYSTOP = KERNBASE + 128 * 1024 * 1024
TRAMPOLINE = MAXVA - PGSIZE
TRAPFRAME = TRAMPOLINE - PGSIZE
UNIX_TEST = 0x101000


def pg_round_up(sz: int) -> int:
    """Round ``sz`` up to a page boundary (64-bit wrap-around)."""
    return _u64(sz + PGSIZE - 1) & ~(PGSIZE - 1) & _MASK64


def pg_round_down(a: int) -> int:
    """Round ``a`` down to a page boundary."""
    return _u64(a) & ~(PGSIZE - 1) & _MASK64


def pa_to_pte(pa: int) -> int:
    """Shift a physical address into the PPN field of a PTE."""
    return _u64((_u64(pa) >> 12) << 10)


def pte_to_pa(pte: int) -> int:
    """Extract the physical address held by a PTE."""
    return _u64((_u64(pte) >> 10) << 12)


def pte_flags(pte: int) -> int:
    """Return the low ten flag bits of a PTE."""
    return _u64(pte) & 0x3FF


def pxshift(level: int) -> int:
    """Bit position of the page table index for ``level``."""
    return PGSHIFT + 9 * level


def px(level: int, va: int) -> int:
    """The 9-bit page table index of ``va`` at ``level``."""
    return (_u64(va) >> pxshift(level)) & PXMASK


def make_satp(pagetable: int) -> int:
    """Build a satp value selecting Sv39 with the given root page table."""
    return SATP_SV39 | (_u64(pagetable) >> 12)


def kstack(p: int) -> int:
    """Virtual address of the kernel stack of process slot ``p``."""
    return _u64(TRAMPOLINE - (p + 1) * 2 * PGSIZE)


def clint_mtimecmp(hartid: int) -> int:
    """Address of the timer compare register of a hart."""
    return CLINT + 0x4000 + 8 * hartid


def plic_menable(hart: int) -> int:
    return PLIC + 0x2000 + hart * 0x100


def plic_senable(hart: int) -> int:
    return PLIC + 0x2080 + hart * 0x100


def plic_mpriority(hart: int) -> int:
    return PLIC + 0x200000 + hart * 0x2000


def plic_spriority(hart: int) -> int:
    return PLIC + 0x201000 + hart * 0x2000


def plic_mclaim(hart: int) -> int:
    return PLIC + 0x200004 + hart * 0x2000


def plic_sclaim(hart: int) -> int:
    return PLIC + 0x201004 + hart * 0x2000