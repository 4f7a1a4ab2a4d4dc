import operator
from typing import Optional, Tuple


def _bitwise(fn):
    return lambda a, b: (fn(a, b), None)


class ALU:
    """8xy_ arithmetic. Each op returns (result, flag); flag None leaves VF alone."""
    OPS = {
        "OR" : _bitwise(operator.or_),
        "AND": _bitwise(operator.and_),
        "XOR": _bitwise(operator.xor),
        "ADD": lambda a, b: (a + b, int(a + b > 0xFF)),    # carry
        "SUB": lambda a, b: (a - b, int(a >= b)),          # 1 = no borrow
        "SUBN": lambda a, b: (b - a, int(b >= a)),
        "SHR": lambda a, b: (a >> 1, a & 0x01),            # b unused
        "SHL": lambda a, b: (a << 1, (a & 0x80) >> 7),
    }

    @classmethod
    def execute(cls, op: str, a: int, b: int = 0) -> Tuple[int, Optional[int]]:
        try:
            result, flag = cls.OPS[op](a, b)
        except KeyError as e:
            raise ValueError(f"Unsupported ALU op {op}") from e
        return result & 0xFF, flag
