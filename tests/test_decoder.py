import pytest

from chip8.decoder import FAMILY_F, PRIMARY, Op, decode

SAMPLES = {
    0x00E0: Op.CLS, 0x00EE: Op.RET,
    0x1ABC: Op.JP, 0x2ABC: Op.CALL,
    0x3122: Op.SE_VX_KK, 0x4122: Op.SNE_VX_KK, 0x5120: Op.SE_VX_VY,
    0x6122: Op.LD_VX_KK, 0x7122: Op.ADD_VX_KK,
    0x8120: Op.LD_VX_VY, 0x8121: Op.OR, 0x8122: Op.AND, 0x8123: Op.XOR,
    0x8124: Op.ADD_VX_VY, 0x8125: Op.SUB, 0x8126: Op.SHR, 0x8127: Op.SUBN,
    0x812E: Op.SHL, 0x9120: Op.SNE_VX_VY,
    0xA123: Op.LD_I, 0xB123: Op.JP_V0, 0xC1FF: Op.RND, 0xD125: Op.DRW,
    0xE19E: Op.SKP, 0xE1A1: Op.SKNP,
    0xF107: Op.LD_VX_DT, 0xF10A: Op.LD_VX_K, 0xF115: Op.LD_DT_VX,
    0xF118: Op.LD_ST_VX, 0xF11E: Op.ADD_I_VX, 0xF129: Op.LD_F_VX,
    0xF133: Op.LD_B_VX, 0xF155: Op.LD_MEM_VX, 0xF165: Op.LD_VX_MEM,
}


def test_every_documented_opcode_resolves():
    assert len(SAMPLES) == 34
    assert len(Op) == 35         # 34 instructions + NOP
    for word, op in SAMPLES.items():
        assert decode(word).op is op, f"{word:04X}"
    assert set(SAMPLES.values()) == set(Op) - {Op.NOP}


def test_operand_fields():
    ins = decode(0xD4B7)
    assert (ins.x, ins.y, ins.n, ins.kk, ins.nnn) == (0x4, 0xB, 0x7, 0xB7, 0x4B7)
    assert ins.raw == 0xD4B7
    assert str(ins) == "D4B7 DRW Vx, Vy, n"


@pytest.mark.parametrize("word", [0x0123, 0x812F, 0x8128, 0xE000, 0xF0FF, 0xF066])
def test_unmapped_words_are_nop(word):
    assert decode(word).op is Op.NOP


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        PRIMARY[0x1] = Op.NOP
    with pytest.raises(TypeError):
        FAMILY_F[0x99] = Op.CLS
