import logging
from typing import Iterable, List

from .bits import extract_unsigned, to_address, to_instruction, to_word
from .condition_code import ConditionCode
from .disassembler import disassemble
from .errors import AddressOutOfRange, CpuNotRunning
from .instructions import HANDLERS
from .memory import Memory, MEM_SIZE
from .operations import decode
from .registers import Registers
from .traps import StreamConsole

logger = logging.getLogger(__name__)


class CPU:
    """
    LC-3 soft-CPU: register file, 64K-word memory, PC/IR/CC and a running flag.
    ─────────────────────────────────────────────────────
    • fetch()         : IR = M[PC], PC++ (16-bit wrap)
    • decode_execute(): opcode bits[15:12] → handler
    • step()          : one cycle (fetch → decode/exec)
    • run(n)          : up to n cycles, stops on HALT or error
    • reset()         : registers/memory back to zero
    """

    def __init__(self, console=None):
        self.reg = Registers()   # R0..R7, PC, IR, CC
        self.mem = Memory()      # 64K words, zeroed
        self.running = True
        self.cycles = 0
        self.console = console if console is not None else StreamConsole()

    # ───────────────────────────── fetch ─────────────────────────────
    def fetch(self):
        """Read the word at PC into IR, PC += 1"""
        self.reg.ir = to_instruction(self.mem.read(self.reg.pc))
        self.reg.pc = to_address(self.reg.pc + 1)

    # ───────────────────────── decode / execute ──────────────────────
    def decode_execute(self):
        op = decode(extract_unsigned(self.reg.ir, 15, 12))
        HANDLERS[op](self)

    def set_destination(self, reg_num: int, value: int):
        """Write a destination register and update CC from its sign."""
        word = to_word(value)
        self.reg[reg_num] = word
        self.reg.cc = ConditionCode.from_value(word)

    # ───────────────────────────── runner ─────────────────────────────
    def step(self):
        """Run one fetch-decode-execute cycle"""
        if not self.running:
            raise CpuNotRunning()
        addr = self.reg.pc
        self.fetch()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("x%04X: x%04X | %s", addr, self.reg.ir, disassemble(self.reg.ir))
        self.decode_execute()
        self.cycles += 1

    def run(self, max_cycles: int):
        """Run up to `max_cycles` cycles; returns early once halted."""
        for _ in range(max_cycles):
            self.step()
            if not self.running:
                break

    def reset(self):
        """Return CPU/registers/memory to the power-on state"""
        self.__init__(self.console)

    # ───────────────────────────── loading ────────────────────────────
    def load(self, start_address: int, instructions: Iterable[int]):
        """Copy a program image into memory and point PC at its first word."""
        count = self.mem.load(start_address, instructions)
        self.reg.pc = start_address
        logger.info("Loaded %d words at x%04X", count, start_address)

    def load_program(self, program):
        self.load(program.start, program.instructions)

    # ─────────────────────────── front-end API ────────────────────────
    def set_program_counter(self, addr: int):
        if not 0 <= addr < MEM_SIZE:
            raise AddressOutOfRange(addr)
        self.reg.pc = addr
        self.running = True
        logger.info("PC set to x%04X", addr)

    def set_register(self, num: int, value: int):
        self.reg[num] = value

    def set_memory(self, addr: int, value: int):
        self.mem.write(addr, value)

    # ─────────────────────────── read accessors ───────────────────────
    @property
    def pc(self) -> int:
        return self.reg.pc

    @property
    def ir(self) -> int:
        return self.reg.ir

    @property
    def cc(self) -> ConditionCode:
        return self.reg.cc

    @property
    def registers(self) -> List[int]:
        return list(self.reg.gpr)

    @property
    def memory(self) -> List[int]:
        return self.mem.cells()
