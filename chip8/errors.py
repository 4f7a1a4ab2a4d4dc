"""Exceptions raised by the interpreter core."""


class Chip8Error(RuntimeError):
    """Base class for every interpreter failure."""


class LoadError(Chip8Error):
    """ROM missing, unreadable or too large for program memory."""


class StackOverflowError(Chip8Error):
    """CALL with all 16 stack entries in use."""


class StackUnderflowError(Chip8Error):
    """RET with an empty stack."""


class MemoryAccessError(Chip8Error, IndexError):
    """Address outside 0x000-0xFFF."""
