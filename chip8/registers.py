from dataclasses import dataclass, field
from typing import List

from .errors import StackOverflowError, StackUnderflowError

GENERAL_REGS = 16          # V0–VF
STACK_DEPTH = 16
FLAG = 0xF                 # VF: carry / borrow / collision
PROGRAM_START = 0x200


@dataclass
class Registers:
    v: List[int] = field(default_factory=lambda: [0]*GENERAL_REGS)
    i: int = 0
    pc: int = PROGRAM_START
    sp: int = 0
    stack: List[int] = field(default_factory=lambda: [0]*STACK_DEPTH)
    delay: int = 0
    sound: int = 0

    def __getitem__(self, idx: int) -> int:
        if 0 <= idx < GENERAL_REGS:
            return self.v[idx]
        raise IndexError("Invalid register index")

    def __setitem__(self, idx: int, value: int) -> None:
        if 0 <= idx < GENERAL_REGS:
            self.v[idx] = value & 0xFF
        else:
            raise IndexError("Invalid register index")

    @property
    def vf(self) -> int:
        return self.v[FLAG]

    @vf.setter
    def vf(self, value: int) -> None:
        self[FLAG] = value

    # ───────────────────────────── stack ─────────────────────────────
    def push(self, addr: int) -> None:
        """Store a return address and bump SP."""
        if self.sp >= STACK_DEPTH:
            raise StackOverflowError(
                f"Stack overflow: more than {STACK_DEPTH} nested calls")
        self.stack[self.sp] = addr & 0xFFFF
        self.sp += 1

    def pop(self) -> int:
        """Drop SP and return the address it pointed at."""
        if self.sp == 0:
            raise StackUnderflowError(
                "Stack underflow: RET with empty stack")
        self.sp -= 1
        return self.stack[self.sp]

    # ───────────────────────────── timers ────────────────────────────
    def tick_timers(self) -> None:
        """Decrement delay and sound timers by one if nonzero."""
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1
