"""Instruction decoding.

A 16-bit word is resolved to an ``Op`` through nibble-indexed tables: the top
nibble selects an entry in ``PRIMARY``; the ``0``, ``8`` and ``E`` families are
re-indexed by the bottom nibble and the ``F`` family by the bottom byte.
Anything that doesn't resolve decodes to ``Op.NOP``.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Op(Enum):
    NOP = "NOP"
    CLS = "CLS"
    RET = "RET"
    JP = "JP nnn"
    CALL = "CALL nnn"
    SE_VX_KK = "SE Vx, kk"
    SNE_VX_KK = "SNE Vx, kk"
    SE_VX_VY = "SE Vx, Vy"
    LD_VX_KK = "LD Vx, kk"
    ADD_VX_KK = "ADD Vx, kk"
    LD_VX_VY = "LD Vx, Vy"
    OR = "OR Vx, Vy"
    AND = "AND Vx, Vy"
    XOR = "XOR Vx, Vy"
    ADD_VX_VY = "ADD Vx, Vy"
    SUB = "SUB Vx, Vy"
    SHR = "SHR Vx"
    SUBN = "SUBN Vx, Vy"
    SHL = "SHL Vx"
    SNE_VX_VY = "SNE Vx, Vy"
    LD_I = "LD I, nnn"
    JP_V0 = "JP V0, nnn"
    RND = "RND Vx, kk"
    DRW = "DRW Vx, Vy, n"
    SKP = "SKP Vx"
    SKNP = "SKNP Vx"
    LD_VX_DT = "LD Vx, DT"
    LD_VX_K = "LD Vx, K"
    LD_DT_VX = "LD DT, Vx"
    LD_ST_VX = "LD ST, Vx"
    ADD_I_VX = "ADD I, Vx"
    LD_F_VX = "LD F, Vx"
    LD_B_VX = "LD B, Vx"
    LD_MEM_VX = "LD [I], Vx"
    LD_VX_MEM = "LD Vx, [I]"


FAMILY_0 = MappingProxyType({
    0x0: Op.CLS,    # 00E0
    0xE: Op.RET,    # 00EE
})

FAMILY_8 = MappingProxyType({
    0x0: Op.LD_VX_VY,
    0x1: Op.OR,
    0x2: Op.AND,
    0x3: Op.XOR,
    0x4: Op.ADD_VX_VY,
    0x5: Op.SUB,
    0x6: Op.SHR,
    0x7: Op.SUBN,
    0xE: Op.SHL,
})

FAMILY_E = MappingProxyType({
    0xE: Op.SKP,    # Ex9E
    0x1: Op.SKNP,   # ExA1
})

FAMILY_F = MappingProxyType({
    0x07: Op.LD_VX_DT,
    0x0A: Op.LD_VX_K,
    0x15: Op.LD_DT_VX,
    0x18: Op.LD_ST_VX,
    0x1E: Op.ADD_I_VX,
    0x29: Op.LD_F_VX,
    0x33: Op.LD_B_VX,
    0x55: Op.LD_MEM_VX,
    0x65: Op.LD_VX_MEM,
})

# top nibble -> Op, or a (table, mask) pair for the prefix families
PRIMARY = MappingProxyType({
    0x0: (FAMILY_0, 0x000F),
    0x1: Op.JP,
    0x2: Op.CALL,
    0x3: Op.SE_VX_KK,
    0x4: Op.SNE_VX_KK,
    0x5: Op.SE_VX_VY,
    0x6: Op.LD_VX_KK,
    0x7: Op.ADD_VX_KK,
    0x8: (FAMILY_8, 0x000F),
    0x9: Op.SNE_VX_VY,
    0xA: Op.LD_I,
    0xB: Op.JP_V0,
    0xC: Op.RND,
    0xD: Op.DRW,
    0xE: (FAMILY_E, 0x000F),
    0xF: (FAMILY_F, 0x00FF),
})


@dataclass(frozen=True)
class Instruction:
    op: Op
    raw: int
    x: int      # bits 11-8
    y: int      # bits 7-4
    n: int      # bits 3-0
    kk: int     # bits 7-0
    nnn: int    # bits 11-0

    def __str__(self):
        return f"{self.raw:04X} {self.op.value}"


def resolve(word: int) -> Op:
    entry = PRIMARY[(word & 0xF000) >> 12]
    if isinstance(entry, Op):
        return entry
    table, mask = entry
    return table.get(word & mask, Op.NOP)


def decode(word: int) -> Instruction:
    """Split a 16-bit instruction word into its Op and operand fields."""
    word &= 0xFFFF
    return Instruction(
        op=resolve(word),
        raw=word,
        x=(word & 0x0F00) >> 8,
        y=(word & 0x00F0) >> 4,
        n=word & 0x000F,
        kk=word & 0x00FF,
        nnn=word & 0x0FFF,
    )
