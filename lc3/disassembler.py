"""Render an instruction word as assembly text for traces and the GUI.

Fields are decoded with the same extractors the CPU uses, so the text
shows the operands the simulator will actually apply.
"""
from .bits import extract_signed, extract_unsigned, to_instruction
from .operations import Operation, decode
from .traps import TrapCode


def _r(n: int) -> str:
    return f"R{n}"


def disassemble(word: int) -> str:
    instr = to_instruction(word)
    op = decode(extract_unsigned(instr, 15, 12))
    dr = extract_unsigned(instr, 11, 9)
    sr1 = extract_unsigned(instr, 8, 6)

    if op == Operation.BR:
        nzp = extract_unsigned(instr, 11, 9)
        if nzp == 0:
            return "NOP"
        flags = "".join(c for c, bit in zip("nzp", (4, 2, 1)) if nzp & bit)
        return f"BR{flags} #{extract_signed(instr, 8, 0)}"
    if op in (Operation.ADD, Operation.AND):
        if extract_unsigned(instr, 5, 5):
            operand = f"#{extract_signed(instr, 4, 0)}"
        else:
            operand = _r(extract_unsigned(instr, 2, 0))
        return f"{op.name} {_r(dr)}, {_r(sr1)}, {operand}"
    if op == Operation.NOT:
        return f"NOT {_r(dr)}, {_r(sr1)}"
    if op in (Operation.LD, Operation.LDI, Operation.ST, Operation.STI, Operation.LEA):
        return f"{op.name} {_r(dr)}, #{extract_signed(instr, 8, 0)}"
    if op == Operation.LDR:
        return f"LDR {_r(dr)}, {_r(sr1)}, #{extract_signed(instr, 5, 0)}"
    if op == Operation.STR:
        return f"STR {_r(dr)}, {_r(sr1)}, #{extract_unsigned(instr, 5, 0)}"
    if op == Operation.JSR:
        if extract_unsigned(instr, 11, 11):
            return f"JSR #{extract_signed(instr, 10, 0)}"
        return f"JSRR {_r(sr1)}"
    if op == Operation.JMP:
        return "RET" if sr1 == 7 else f"JMP {_r(sr1)}"
    if op == Operation.TRAP:
        code = extract_unsigned(instr, 7, 0)
        try:
            return TrapCode(code).name
        except ValueError:
            return f"TRAP x{code:02X}"
    if op == Operation.RTI:
        return "RTI"
    return f".FILL x{instr:04X}"
