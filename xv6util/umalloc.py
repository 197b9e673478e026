"""A first-fit free-list allocator over a simulated, sbrk-grown heap.

Addresses are byte offsets; block headers occupy one unit of
``HEADER_SIZE`` bytes placed before each allocated area.
"""

HEADER_SIZE = 16
MIN_MORECORE = 4096

_BASE = 0


class Heap:
    """Heap that grows by ``sbrk`` up to ``limit`` bytes."""

    _START = HEADER_SIZE

    def __init__(self, limit):
        self.limit = limit
        self._brk = self._START
        self._size = {}
        self._next = {}
        self._freep = None
        self._allocated = set()

    def sbrk(self, nunits):
        """Extend the heap by ``nunits`` header units; return the old break."""
        if nunits < 0:
            raise ValueError("sbrk: negative increment")
        nbytes = nunits * HEADER_SIZE
        if self._brk - self._START + nbytes > self.limit:
            raise MemoryError("sbrk: heap limit reached")
        old = self._brk
        self._brk += nbytes
        return old

    def _morecore(self, nunits):
        nunits = max(nunits, MIN_MORECORE)
        try:
            hp = self.sbrk(nunits)
        except MemoryError:
            return None
        self._size[hp] = nunits
        self._release(hp)
        return self._freep

    def malloc(self, nbytes):
        """Allocate ``nbytes`` and return the address of the usable area."""
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next[p]
                else:
                    self._size[p] -= nunits
                    p += self._size[p] * HEADER_SIZE
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return p + HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
                if p is None:
                    raise MemoryError("malloc: out of memory")
            prevp, p = p, self._next[p]

    def free(self, address):
        """Return an area obtained from ``malloc`` to the free list."""
        bp = address - HEADER_SIZE
        if bp not in self._allocated:
            raise ValueError(f"free: {address} is not an allocated block")
        self._allocated.discard(bp)
        self._release(bp)

    def _release(self, bp):
        size, nxt = self._size, self._next
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        if bp + size[bp] * HEADER_SIZE == nxt[p]:
            size[bp] += size[nxt[p]]
            nxt[bp] = nxt[nxt[p]]
        else:
            nxt[bp] = nxt[p]
        if p + size[p] * HEADER_SIZE == bp:
            size[p] += size[bp]
            nxt[p] = nxt[bp]
        else:
            nxt[p] = bp
        self._freep = p

    def free_blocks(self):
        """Free blocks as (header address, size in units), in address order."""
        if self._freep is None:
            return []
        blocks = []
        p = self._next[_BASE]
        while p != _BASE:
            blocks.append((p, self._size[p]))
            p = self._next[p]
        return sorted(blocks)