"""
Growable tape memory.

Cells are 32-bit unsigned and start at zero. The pointer covers the whole
machine-word address range and wraps in both directions. Storage only grows
when a write lands past its end; reading there just sees zero.
"""

from errors import TapeAllocationError

INITIAL_TAPE_SIZE = 65536
ADDRESS_BITS = 64
CELL_BITS = 32
CELL_MASK = (1 << CELL_BITS) - 1


class Tape:
    def __init__(self, size=INITIAL_TAPE_SIZE, address_bits=ADDRESS_BITS):
        self.cells = [0] * size
        self.ptr = 0
        self.address_mask = (1 << address_bits) - 1

    def __len__(self):
        return len(self.cells)

    def move(self, delta):
        self.ptr = (self.ptr + delta) & self.address_mask

    def read(self):
        return self.peek(self.ptr)

    def peek(self, address):
        """Cell value at any address, without moving the pointer or growing."""
        if address >= len(self.cells):
            return 0
        return self.cells[address]

    def write(self, value):
        self._grow_to(self.ptr)
        self.cells[self.ptr] = value & CELL_MASK

    def write_delta(self, delta):
        self.write(self.read() + delta)

    def _grow_to(self, address):
        # Double (from at least 1) until the address fits
        length = len(self.cells)
        if address < length:
            return
        target = max(1, length) * 2
        while address >= target:
            target *= 2
        try:
            self.cells.extend([0] * (target - length))
        except (MemoryError, OverflowError) as e:
            raise TapeAllocationError(address) from e

