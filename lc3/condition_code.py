from enum import Enum


class ConditionCode(Enum):
    """NZP flag set by every destination-register write."""

    NEGATIVE = 0b100
    ZERO = 0b010
    POSITIVE = 0b001

    @property
    def flag(self) -> int:
        return self.value

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def from_value(cls, value: int) -> "ConditionCode":
        if value < 0:
            return cls.NEGATIVE
        if value == 0:
            return cls.ZERO
        return cls.POSITIVE

    def matches(self, nzp: int) -> bool:
        """True when a BR instruction's nzp mask selects this code."""
        return bool(nzp & self.flag)

    def __str__(self):
        return self.letter
