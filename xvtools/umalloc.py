"""A first-fit free-list allocator over a simulated program break."""

HEADER_SIZE = 16
MIN_GROWTH = 4096

_BASE = -1  # the sentinel header, placed below every heap address


class Heap:
    """A heap that grows with sbrk and hands out blocks in header units.

    Addresses are byte offsets from the start of the heap; every block is
    preceded by a header of HEADER_SIZE bytes.
    """

    def __init__(self, limit):
        if limit < 0:
            raise ValueError("heap limit must not be negative")
        self.limit = limit
        self._brk = 0
        self._next = {}
        self._size = {}
        self._freep = None
        self._allocated = set()

    def sbrk(self, nunits):
        """Grow the break by nunits headers and return the old break."""
        if nunits < 0:
            raise ValueError("sbrk cannot shrink this heap")
        grow = nunits * HEADER_SIZE
        if self._brk + grow > self.limit:
            raise MemoryError(f"cannot grow heap by {grow} bytes")
        old = self._brk
        self._brk += grow
        return old

    def _morecore(self, nunits):
        nunits = max(nunits, MIN_GROWTH)
        unit = self.sbrk(nunits) // HEADER_SIZE
        self._size[unit] = nunits
        self._release(unit)
        return self._freep

    def malloc(self, nbytes):
        """Allocate nbytes and return the address of the usable block."""
        if nbytes < 0:
            raise ValueError("cannot allocate a negative size")
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
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return (p + 1) * HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
            prevp, p = p, self._next[p]

    def free(self, address):
        """Return a block obtained from malloc to the free list."""
        bp = address // HEADER_SIZE - 1
        if address % HEADER_SIZE or bp not in self._allocated:
            raise ValueError(f"address {address} was not allocated")
        self._allocated.remove(bp)
        self._release(bp)

    def _release(self, bp):
        nxt, size = self._next, self._size
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        after = nxt[p]
        if bp + size[bp] == after:
            size[bp] += size.pop(after)
            nxt[bp] = nxt.pop(after)
        else:
            nxt[bp] = after
        if p + size[p] == bp:
            size[p] += size.pop(bp)
            nxt[p] = nxt.pop(bp)
        else:
            nxt[p] = bp
        self._freep = p

    def free_blocks(self):
        """Return the free blocks as (header address, size in bytes), in address order."""
        if self._freep is None:
            return []
        blocks = []
        p = self._next[_BASE]
        while p != _BASE:
            blocks.append((p * HEADER_SIZE, self._size[p] * HEADER_SIZE))
            p = self._next[p]
        return sorted(blocks)