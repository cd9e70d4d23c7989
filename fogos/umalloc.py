"""A first-fit free-list allocator over a growable heap region."""

from __future__ import annotations

HEADER_SIZE = 16  # bytes in one block header; also the allocation unit
MIN_UNITS = 4096  # smallest number of units requested when the heap grows
DEFAULT_LIMIT = 128 * 1024 * 1024

_BASE = 0  # the permanent zero-sized list head, below every heap block


class Heap:
    """A heap whose blocks are kept on an address-ordered circular free list.

    Addresses are byte offsets; the heap proper starts just above the list
    head and grows by at least ``MIN_UNITS`` units until ``limit`` bytes
    have been taken.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if limit < 0:
            raise ValueError("heap limit must not be negative")
        self.limit = limit
        self._brk = _BASE + 1
        self._next: dict[int, int] = {}
        self._size: dict[int, int] = {}
        self._allocated: set[int] = set()
        self._freep: int | None = None

    def malloc(self, nbytes: int) -> int:
        """Allocate ``nbytes`` and return the address of the block's data."""
        if nbytes < 0:
            raise ValueError("cannot allocate a negative number of bytes")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE
        prevp = self._freep
        p = self._next[prevp]
        while True:
            size = self._size[p]
            if size >= nunits:
                if size == nunits:
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] = size - nunits
                    p += size - nunits
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return (p + 1) * HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
            prevp, p = p, self._next[p]

    def free(self, addr: int) -> None:
        """Return a block obtained from :meth:`malloc` to the free list."""
        bp, rem = divmod(addr, HEADER_SIZE)
        bp -= 1
        if rem or bp not in self._allocated:
            raise ValueError(f"address {addr} is not an allocated block")
        self._allocated.remove(bp)
        self._insert(bp)

    def free_blocks(self) -> list[tuple[int, int]]:
        """Free blocks as (header address, size in bytes), in address order."""
        if self._freep is None:
            return []
        blocks = []
        p = self._next[_BASE]
        while p != _BASE:
            blocks.append((p * HEADER_SIZE, self._size[p] * HEADER_SIZE))
            p = self._next[p]
        return blocks

    def _morecore(self, nunits: int) -> int:
        nu = max(nunits, MIN_UNITS)
        taken = (self._brk - _BASE - 1) * HEADER_SIZE
        if taken + nu * HEADER_SIZE > self.limit:
            raise MemoryError(f"heap cannot grow by {nu * HEADER_SIZE} bytes")
        hp = self._brk
        self._brk += nu
        self._size[hp] = nu
        self._insert(hp)
        assert self._freep is not None
        return self._freep

    def _insert(self, bp: int) -> None:
        assert self._freep is not None
        p = self._freep
        while not (p < bp < self._next[p]):
            if p >= self._next[p] and (bp > p or bp < self._next[p]):
                break
            p = self._next[p]
        nxt = self._next[p]
        if bp + self._size[bp] == nxt:
            self._size[bp] += self._size.pop(nxt)
            self._next[bp] = self._next.pop(nxt)
        else:
            self._next[bp] = nxt
        if p + self._size[p] == bp:
            self._size[p] += self._size.pop(bp)
            self._next[p] = self._next.pop(bp)
        else:
            self._next[p] = bp
        self._freep = p