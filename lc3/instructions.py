"""
Semantics of the sixteen LC-3 operations.

Each handler receives the CPU after fetch, so `cpu.reg.pc` already
points at the next instruction and `cpu.reg.ir` holds the current one.
Every computed address wraps to 16 bits before memory is indexed.
"""
from .alu import ALU
from .bits import extract_signed, extract_unsigned, to_address
from .errors import ReservedOpcode, UnsupportedOperation
from .operations import Operation
from .registers import RETURN_REG
from .traps import execute_trap


def _pc_relative(cpu) -> int:
    """PC + SEXT(offset9), the effective address of LD/ST/LDI/STI/LEA."""
    return to_address(cpu.reg.pc + extract_signed(cpu.reg.ir, 8, 0))


# ───────────── BR (0000) ──────────────
def instr_br(cpu):
    nzp = extract_unsigned(cpu.reg.ir, 11, 9)
    offset9 = extract_signed(cpu.reg.ir, 8, 0)
    if cpu.reg.cc.matches(nzp):
        cpu.reg.pc = to_address(cpu.reg.pc + offset9)


# ───────────── ADD (0001) / AND (0101) ─
def _arith(cpu, op: str):
    instr = cpu.reg.ir
    dr = extract_unsigned(instr, 11, 9)
    src1 = extract_unsigned(instr, 8, 6)
    if extract_unsigned(instr, 5, 5):          # imm5
        operand = extract_signed(instr, 4, 0)
    else:                                      # register-register
        operand = cpu.reg[extract_unsigned(instr, 2, 0)]
    cpu.set_destination(dr, ALU.execute(op, cpu.reg[src1], operand))


def instr_add(cpu):
    _arith(cpu, "ADD")


def instr_and(cpu):
    _arith(cpu, "AND")


# ───────────── NOT (1001) ─────────────
def instr_not(cpu):
    dr = extract_unsigned(cpu.reg.ir, 11, 9)
    src = extract_unsigned(cpu.reg.ir, 8, 6)
    cpu.set_destination(dr, ALU.execute("NOT", cpu.reg[src]))


# ───────────── LD (0010) ──────────────
def instr_ld(cpu):
    dr = extract_unsigned(cpu.reg.ir, 11, 9)
    cpu.set_destination(dr, cpu.mem.read(_pc_relative(cpu)))


# ───────────── LDI (1010) ─────────────
def instr_ldi(cpu):
    dr = extract_unsigned(cpu.reg.ir, 11, 9)
    ptr = cpu.mem.read(_pc_relative(cpu))
    cpu.set_destination(dr, cpu.mem.read(to_address(ptr)))


# ───────────── LDR (0110) ─────────────
def instr_ldr(cpu):
    dr = extract_unsigned(cpu.reg.ir, 11, 9)
    base = extract_unsigned(cpu.reg.ir, 8, 6)
    off6 = extract_signed(cpu.reg.ir, 5, 0)
    cpu.set_destination(dr, cpu.mem.read(to_address(cpu.reg[base] + off6)))


# ───────────── ST (0011) ──────────────
def instr_st(cpu):
    sr = extract_unsigned(cpu.reg.ir, 11, 9)
    cpu.mem.write(_pc_relative(cpu), cpu.reg[sr])


# ───────────── STI (1011) ─────────────
def instr_sti(cpu):
    sr = extract_unsigned(cpu.reg.ir, 11, 9)
    ptr = cpu.mem.read(_pc_relative(cpu))
    cpu.mem.write(to_address(ptr), cpu.reg[sr])


# ───────────── STR (0111) ─────────────
def instr_str(cpu):
    sr = extract_unsigned(cpu.reg.ir, 11, 9)
    base = extract_unsigned(cpu.reg.ir, 8, 6)
    # zero-extended, unlike LDR
    off6 = extract_unsigned(cpu.reg.ir, 5, 0)
    cpu.mem.write(to_address(cpu.reg[base] + off6), cpu.reg[sr])


# ───────────── JSR / JSRR (0100) ──────
def instr_jsr(cpu):
    cpu.reg[RETURN_REG] = cpu.reg.pc
    if extract_unsigned(cpu.reg.ir, 11, 11):   # JSR (PC+off11)
        off11 = extract_signed(cpu.reg.ir, 10, 0)
        cpu.reg.pc = to_address(cpu.reg.pc + off11)
    else:                                      # JSRR (BaseR)
        base = extract_unsigned(cpu.reg.ir, 8, 6)
        cpu.reg.pc = to_address(cpu.reg[base])


# ───────────── JMP / RET (1100) ───────
def instr_jmp(cpu):
    base = extract_unsigned(cpu.reg.ir, 8, 6)
    cpu.reg.pc = to_address(cpu.reg[base])


# ───────────── LEA (1110) ─────────────
def instr_lea(cpu):
    dr = extract_unsigned(cpu.reg.ir, 11, 9)
    cpu.set_destination(dr, _pc_relative(cpu))


# ───────────── TRAP (1111) ────────────
def instr_trap(cpu):
    execute_trap(cpu, extract_unsigned(cpu.reg.ir, 7, 0))


# ───────────── RTI (1000) / 1101 ──────
def instr_rti(cpu):
    raise UnsupportedOperation("RTI")


def instr_reserved(cpu):
    raise ReservedOpcode()


HANDLERS = {
    Operation.BR: instr_br,
    Operation.ADD: instr_add,
    Operation.LD: instr_ld,
    Operation.ST: instr_st,
    Operation.JSR: instr_jsr,
    Operation.AND: instr_and,
    Operation.LDR: instr_ldr,
    Operation.STR: instr_str,
    Operation.RTI: instr_rti,
    Operation.NOT: instr_not,
    Operation.LDI: instr_ldi,
    Operation.STI: instr_sti,
    Operation.JMP: instr_jmp,
    Operation.RESERVED: instr_reserved,
    Operation.LEA: instr_lea,
    Operation.TRAP: instr_trap,
}
