"""Text dumps of machine state for the console front end."""
from .disassembler import disassemble
from .registers import GENERAL_REGS


def hex16(value: int) -> str:
    return f"x{value & 0xFFFF:04X}"


def format_control_unit(cpu) -> str:
    return (f"PC = {hex16(cpu.pc)}    IR = {hex16(cpu.ir)}    "
            f"CC = {cpu.cc}    RUNNING: {int(cpu.running)}")


def format_registers(cpu) -> str:
    """Registers in two rows of four."""
    rows = []
    half = GENERAL_REGS // 2
    for start in range(0, GENERAL_REGS, half):
        cells = [f"R{i}: {hex16(v)} {v:6d}"
                 for i, v in enumerate(cpu.registers[start:start + half], start)]
        rows.append("    ".join(cells))
    return "\n".join(rows)


def format_memory(cpu) -> str:
    """Non-zero cells only; a zeroed 64K image would drown the output."""
    lines = ["Memory (addresses x0000 - xFFFF, zero cells omitted)"]
    for addr, value in enumerate(cpu.memory):
        if value:
            lines.append(f"{hex16(addr)}: {hex16(value)} {value:6d}    {disassemble(value)}")
    return "\n".join(lines)


def format_all(cpu) -> str:
    return "\n".join([
        "Control Unit:",
        format_control_unit(cpu),
        format_registers(cpu),
        "",
        format_memory(cpu),
    ])
