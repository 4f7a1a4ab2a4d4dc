import pytest

from chip8.errors import StackOverflowError, StackUnderflowError
from chip8.registers import Registers, STACK_DEPTH


def test_initial_state():
    reg = Registers()
    assert reg.v == [0] * 16
    assert reg.pc == 0x200
    assert (reg.i, reg.sp, reg.delay, reg.sound) == (0, 0, 0, 0)


def test_writes_are_8_bit():
    reg = Registers()
    reg[3] = 0x1FF
    assert reg[3] == 0xFF
    reg.vf = 2
    assert reg[0xF] == 2


def test_invalid_index():
    reg = Registers()
    with pytest.raises(IndexError):
        reg[16]
    with pytest.raises(IndexError):
        reg[16] = 1


def test_push_pop_lifo():
    reg = Registers()
    reg.push(0x202)
    reg.push(0x304)
    assert reg.sp == 2
    assert reg.pop() == 0x304
    assert reg.pop() == 0x202
    assert reg.sp == 0


def test_stack_overflow():
    reg = Registers()
    for n in range(STACK_DEPTH):
        reg.push(0x200 + 2 * n)
    with pytest.raises(StackOverflowError):
        reg.push(0x400)
    assert reg.sp == STACK_DEPTH


def test_stack_underflow():
    with pytest.raises(StackUnderflowError):
        Registers().pop()


def test_timers_stop_at_zero():
    reg = Registers(delay=2, sound=1)
    reg.tick_timers()
    assert (reg.delay, reg.sound) == (1, 0)
    reg.tick_timers()
    reg.tick_timers()
    assert (reg.delay, reg.sound) == (0, 0)
