from .errors import LoadError, MemoryAccessError

MEM_SIZE = 4096            # bytes, 0x000-0xFFF
FONT_ADDRESS = 0x050
GLYPH_SIZE = 5             # bytes per font character

# 16 glyphs (0-F), one byte per row, high nibble holds the 4 pixel columns
FONTSET = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
))


class Memory:
    def __init__(self):
        self.mem = bytearray(MEM_SIZE)

    @staticmethod
    def _check(addr: int) -> int:
        if not 0 <= addr < MEM_SIZE:
            raise MemoryAccessError(f"Address 0x{addr:X} out of range")
        return addr

    def read(self, addr: int) -> int:
        """Read one byte"""
        return self.mem[self._check(addr)]

    def write(self, addr: int, value: int):
        """Write one byte (masked to 8 bits)"""
        self.mem[self._check(addr)] = value & 0xFF

    def read_word(self, addr: int) -> int:
        """Read a big-endian 16-bit word from addr, addr+1"""
        return (self.read(addr) << 8) | self.read(addr + 1)

    def load(self, data: bytes, start: int):
        """Copy data into memory at start. Memory is left untouched on failure."""
        if len(data) > MEM_SIZE - start:
            raise LoadError(
                f"Program of {len(data)} bytes does not fit at 0x{start:03X} "
                f"(max {MEM_SIZE - start} bytes)")
        self.mem[start:start + len(data)] = data

    def load_font(self):
        self.mem[FONT_ADDRESS:FONT_ADDRESS + len(FONTSET)] = FONTSET

    def clear(self):
        self.mem[:] = bytes(MEM_SIZE)
