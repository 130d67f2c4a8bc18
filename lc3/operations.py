"""Opcode dispatch: the top four bits of an instruction name one of
sixteen operations. Every 4-bit value decodes; only executing RESERVED
or RTI fails."""
from enum import IntEnum


class Operation(IntEnum):
    BR = 0b0000
    ADD = 0b0001
    LD = 0b0010
    ST = 0b0011
    JSR = 0b0100
    AND = 0b0101
    LDR = 0b0110
    STR = 0b0111
    RTI = 0b1000
    NOT = 0b1001
    LDI = 0b1010
    STI = 0b1011
    JMP = 0b1100
    RESERVED = 0b1101
    LEA = 0b1110
    TRAP = 0b1111


def decode(opcode_bits: int) -> Operation:
    """Map a 4-bit opcode field to its `Operation`."""
    return Operation(opcode_bits & 0xF)
