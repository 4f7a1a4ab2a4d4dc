import logging
import random
from pathlib import Path
from typing import List, Optional

from .alu import ALU
from .decoder import Instruction, Op, decode
from .display import Display
from .errors import LoadError
from .memory import FONT_ADDRESS, GLYPH_SIZE, MEM_SIZE, Memory
from .registers import PROGRAM_START, Registers

log = logging.getLogger(__name__)

NUM_KEYS = 16
MAX_PROGRAM_SIZE = MEM_SIZE - PROGRAM_START    # 3584 bytes

# 8xy_ ops routed through the ALU
ALU_OPS = {
    Op.OR: "OR",
    Op.AND: "AND",
    Op.XOR: "XOR",
    Op.ADD_VX_VY: "ADD",
    Op.SUB: "SUB",
    Op.SHR: "SHR",
    Op.SUBN: "SUBN",
    Op.SHL: "SHL",
}


class CPU:
    """
    CHIP-8 interpreter core.
    ─────────────────────────────────────────────────────
    • fetch()    : read the 16-bit word at PC, PC += 2
    • execute()  : run one decoded instruction
    • step()     : one cycle (fetch → decode → execute → timers)
    • reset()    : re-initialize and reload the last program
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.reg = Registers()
        self.mem = Memory()
        self.display = Display()
        self.keys: List[bool] = [False] * NUM_KEYS
        self.rng = rng or random.Random()
        self.instruction: Optional[Instruction] = None
        self.awaiting_key: Optional[int] = None    # register index for Fx0A
        self.program = b""
        self.initialize()

    def initialize(self):
        """Zero registers/timers, clear memory and screen, load the font, PC = 0x200."""
        self.reg = Registers()
        self.mem.clear()
        self.mem.load_font()
        self.display.clear()
        self.keys[:] = [False] * NUM_KEYS
        self.instruction = None
        self.awaiting_key = None

    # ───────────────────────────── loading ───────────────────────────
    @staticmethod
    def _check_size(data: bytes):
        if len(data) > MAX_PROGRAM_SIZE:
            raise LoadError(
                f"ROM is {len(data)} bytes, at most {MAX_PROGRAM_SIZE} fit in memory")

    def load_program(self, data: bytes):
        """Copy program bytes to 0x200. Raises LoadError if they don't fit."""
        data = bytes(data)
        self._check_size(data)
        self.mem.load(data, PROGRAM_START)
        self.program = data
        log.info("Loaded %d bytes at 0x%03X", len(data), PROGRAM_START)

    @classmethod
    def read_rom(cls, path) -> bytes:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise LoadError(f"Cannot read ROM {path}: {e}") from e
        cls._check_size(data)
        return data

    def load_rom(self, path):
        self.load_program(self.read_rom(path))

    def switch_rom(self, path):
        """Power-cycle with a new ROM. A failed load leaves the running machine untouched."""
        data = self.read_rom(path)
        self.initialize()
        self.load_program(data)

    # ───────────────────────────── keypad ────────────────────────────
    def press(self, key: int):
        self._check_key(key)
        self.keys[key] = True

    def release(self, key: int):
        self._check_key(key)
        self.keys[key] = False

    @staticmethod
    def _check_key(key: int):
        if not 0 <= key < NUM_KEYS:
            raise ValueError(f"Invalid key 0x{key:X}")

    def pressed_key(self) -> Optional[int]:
        """Lowest pressed key index, or None."""
        for k, down in enumerate(self.keys):
            if down:
                return k
        return None

    @property
    def sound_active(self) -> bool:
        return self.reg.sound > 0

    # ───────────────────────────── fetch ─────────────────────────────
    def fetch(self) -> int:
        """Read the big-endian word at PC and advance PC by 2."""
        word = self.mem.read_word(self.reg.pc)
        self.reg.pc = (self.reg.pc + 2) & 0xFFFF
        return word

    def skip(self):
        self.reg.pc = (self.reg.pc + 2) & 0xFFFF

    # ───────────────────────── decode / execute ──────────────────────
    def execute(self, ins: Instruction):
        op, x, y = ins.op, ins.x, ins.y
        reg = self.reg

        # ───────────── 00E0 CLS / 00EE RET ─────────────
        if op is Op.CLS:
            self.display.clear()

        elif op is Op.RET:
            reg.pc = reg.pop()

        # ───────────── 1nnn JP / 2nnn CALL ─────────────
        elif op is Op.JP:
            reg.pc = ins.nnn

        elif op is Op.CALL:
            reg.push(reg.pc)
            reg.pc = ins.nnn

        # ───────────── skips on compare ────────────────
        elif op is Op.SE_VX_KK:
            if reg[x] == ins.kk:
                self.skip()

        elif op is Op.SNE_VX_KK:
            if reg[x] != ins.kk:
                self.skip()

        elif op is Op.SE_VX_VY:
            if reg[x] == reg[y]:
                self.skip()

        elif op is Op.SNE_VX_VY:
            if reg[x] != reg[y]:
                self.skip()

        # ───────────── 6xkk / 7xkk / 8xy0 ──────────────
        elif op is Op.LD_VX_KK:
            reg[x] = ins.kk

        elif op is Op.ADD_VX_KK:
            reg[x] = reg[x] + ins.kk          # wraps, VF untouched

        elif op is Op.LD_VX_VY:
            reg[x] = reg[y]

        # ───────────── 8xy1-8xyE (ALU) ─────────────────
        elif op in ALU_OPS:
            result, flag = ALU.execute(ALU_OPS[op], reg[x], reg[y])
            reg[x] = result
            if flag is not None:
                reg.vf = flag                 # flag wins when x == F

        # ───────────── Annn / Bnnn / Cxkk ──────────────
        elif op is Op.LD_I:
            reg.i = ins.nnn

        elif op is Op.JP_V0:
            reg.pc = (ins.nnn + reg[0]) & 0xFFFF

        elif op is Op.RND:
            reg[x] = self.rng.randrange(256) & ins.kk

        # ───────────── Dxyn DRW ────────────────────────
        elif op is Op.DRW:
            sprite = [self.mem.read(reg.i + row) for row in range(ins.n)]
            reg.vf = int(self.display.draw_sprite(reg[x], reg[y], sprite))

        # ───────────── Ex9E SKP / ExA1 SKNP ────────────
        elif op is Op.SKP:
            if self.keys[reg[x] & 0xF]:
                self.skip()

        elif op is Op.SKNP:
            if not self.keys[reg[x] & 0xF]:
                self.skip()

        # ───────────── Fx__ timers / keys ──────────────
        elif op is Op.LD_VX_DT:
            reg[x] = reg.delay

        elif op is Op.LD_VX_K:
            key = self.pressed_key()
            if key is None:
                self.awaiting_key = x
                log.debug("Fx0A at 0x%03X: waiting for key into V%X", reg.pc - 2, x)
            else:
                reg[x] = key

        elif op is Op.LD_DT_VX:
            reg.delay = reg[x]

        elif op is Op.LD_ST_VX:
            reg.sound = reg[x]

        # ───────────── Fx__ index / memory ─────────────
        elif op is Op.ADD_I_VX:
            reg.i = (reg.i + reg[x]) & 0xFFFF

        elif op is Op.LD_F_VX:
            reg.i = FONT_ADDRESS + GLYPH_SIZE * (reg[x] & 0xF)

        elif op is Op.LD_B_VX:
            value = reg[x]
            self.mem.write(reg.i, value // 100)
            self.mem.write(reg.i + 1, (value // 10) % 10)
            self.mem.write(reg.i + 2, value % 10)

        elif op is Op.LD_MEM_VX:
            for r in range(x + 1):
                self.mem.write(reg.i + r, reg[r])

        elif op is Op.LD_VX_MEM:
            for r in range(x + 1):
                reg[r] = self.mem.read(reg.i + r)

        # ───────────── unmapped ────────────────────────
        else:
            log.debug("Skipping unmapped opcode %04X at 0x%03X", ins.raw, reg.pc - 2)

    def _resolve_key_wait(self):
        key = self.pressed_key()
        if key is not None:
            self.reg[self.awaiting_key] = key
            log.debug("Key %X pressed, stored in V%X", key, self.awaiting_key)
            self.awaiting_key = None

    # ───────────────────────────── runner ─────────────────────────────
    def step(self):
        """One interpreter cycle (fetch-decode-exec, then timer decay)"""
        if self.awaiting_key is not None:
            self._resolve_key_wait()
        else:
            self.instruction = decode(self.fetch())
            self.execute(self.instruction)
        self.reg.tick_timers()

    def reset(self):
        """Back to power-on state with the last loaded program in memory"""
        self.initialize()
        if self.program:
            self.mem.load(self.program, PROGRAM_START)
        log.info("Reset")
