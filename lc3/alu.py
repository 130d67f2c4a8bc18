import operator

from .bits import to_word


def _not(a: int, _unused: int = 0) -> int:
    return ~a


class ALU:
    OPS = {
        "ADD": operator.add,
        "AND": operator.and_,
        "NOT": _not,        # unary; second operand ignored
    }

    @classmethod
    def execute(cls, op: str, a: int, b: int = 0) -> int:
        """Apply `op` and wrap the result to a signed 16-bit word."""
        try:
            return to_word(cls.OPS[op](a, b))
        except KeyError as e:
            raise ValueError(f"Unsupported ALU op {op}") from e
