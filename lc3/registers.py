from dataclasses import dataclass, field
from typing import List

from .bits import to_word
from .condition_code import ConditionCode
from .errors import InvalidRegister

GENERAL_REGS = 8          # R0–R7
SPECIAL_REGS = ["PC", "IR", "CC"]
RETURN_REG = 7            # JSR/JSRR link register


@dataclass
class Registers:
    gpr: List[int] = field(default_factory=lambda: [0]*GENERAL_REGS)
    pc: int = 0
    ir: int = 0
    cc: ConditionCode = ConditionCode.ZERO

    def __getitem__(self, idx: int) -> int:
        if 0 <= idx < GENERAL_REGS:
            return self.gpr[idx]
        raise InvalidRegister(idx)

    def __setitem__(self, idx: int, value: int) -> None:
        if 0 <= idx < GENERAL_REGS:
            self.gpr[idx] = to_word(value)
        else:
            raise InvalidRegister(idx)
