import pytest

from chip8.alu import ALU


def test_add():
    assert ALU.execute("ADD", 2, 3) == (5, 0)


def test_add_carry():
    assert ALU.execute("ADD", 0xFF, 0x02) == (0x01, 1)
    assert ALU.execute("ADD", 0x80, 0x7F) == (0xFF, 0)


def test_sub_no_borrow_includes_equal():
    assert ALU.execute("SUB", 7, 3) == (4, 1)
    assert ALU.execute("SUB", 5, 5) == (0, 1)


def test_sub_borrow_wraps():
    assert ALU.execute("SUB", 3, 7) == (0xFC, 0)


def test_subn_is_y_minus_x():
    assert ALU.execute("SUBN", 3, 10) == (7, 1)
    assert ALU.execute("SUBN", 10, 3) == (0xF9, 0)
    assert ALU.execute("SUBN", 9, 9) == (0, 1)


def test_shifts_report_dropped_bit():
    assert ALU.execute("SHR", 0b10000011) == (0b01000001, 1)
    assert ALU.execute("SHR", 0b00000010) == (0b00000001, 0)
    assert ALU.execute("SHL", 0b10000001) == (0b00000010, 1)
    assert ALU.execute("SHL", 0b01000000) == (0b10000000, 0)


def test_bitwise_ops_leave_flag_alone():
    assert ALU.execute("OR", 0b1100, 0b1010) == (0b1110, None)
    assert ALU.execute("AND", 0b1100, 0b1010) == (0b1000, None)
    assert ALU.execute("XOR", 0b1100, 0b1010) == (0b0110, None)


def test_and_and_xor_differ():
    for a, b in [(0x0F, 0xF0), (0x12, 0x34), (0xFF, 0x01), (0x55, 0xAA)]:
        assert ALU.execute("AND", a, b) != ALU.execute("XOR", a, b)


def test_unknown_op():
    with pytest.raises(ValueError):
        ALU.execute("MUL", 2, 3)
