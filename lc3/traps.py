"""
Software trap routines (TRAP x20-x25) and the console device they talk to.

The CPU owns a console object with two methods, `read_byte()` and
`write(text)`. `StreamConsole` wraps a pair of text streams (stdin/stdout
by default); the GUI supplies its own.
"""
import logging
import sys
from enum import IntEnum

from .bits import to_address
from .errors import InputExhausted, UnsupportedTrapCode
from .memory import MEM_SIZE

logger = logging.getLogger(__name__)

IN_PROMPT = "Enter a character: "
HALT_NOTICE = "Trap halt reached, halting CPU\n"


class TrapCode(IntEnum):
    GETC = 0x20
    OUT = 0x21
    PUTS = 0x22
    IN = 0x23
    HALT = 0x25


class StreamConsole:
    """Character console over text streams; resolves sys.stdin/stdout lazily."""

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin
        self._stdout = stdout
        self._pending = b""

    @property
    def stdin(self):
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self):
        return self._stdout if self._stdout is not None else sys.stdout

    def read_byte(self) -> int:
        """Block until one input byte is available."""
        if not self._pending:
            ch = self.stdin.read(1)
            if not ch:
                raise InputExhausted()
            self._pending = ch.encode("utf-8")
        byte, self._pending = self._pending[0], self._pending[1:]
        return byte

    def write(self, text: str) -> None:
        encoding = getattr(self.stdout, "encoding", None) or "utf-8"
        self.stdout.write(printable(text, encoding))
        self.stdout.flush()


def printable(text: str, encoding: str = "utf-8") -> str:
    """Replace characters `encoding` cannot carry (e.g. lone surrogates) with '?'."""
    return text.encode(encoding, "replace").decode(encoding)


# ───────────────────────────── handlers ──────────────────────────────
def trap_getchar(cpu):
    cpu.reg[0] = cpu.console.read_byte()
    logger.debug("GETC read %d", cpu.reg[0])


def trap_out(cpu):
    cpu.console.write(chr(cpu.reg[0] & 0xFF))


def trap_puts(cpu):
    addr = to_address(cpu.reg[0])
    chars = []
    # one full lap of memory at most
    for _ in range(MEM_SIZE):
        word = cpu.mem.read(addr)
        if word == 0:
            break
        chars.append(chr(to_address(word)))
        addr = to_address(addr + 1)
    cpu.console.write("".join(chars))


def trap_in(cpu):
    cpu.console.write(IN_PROMPT)
    trap_getchar(cpu)


def trap_halt(cpu):
    cpu.console.write(HALT_NOTICE)
    cpu.running = False
    logger.info("HALT at x%04X", cpu.reg.pc)


TRAP_HANDLERS = {
    TrapCode.GETC: trap_getchar,
    TrapCode.OUT: trap_out,
    TrapCode.PUTS: trap_puts,
    TrapCode.IN: trap_in,
    TrapCode.HALT: trap_halt,
}


def execute_trap(cpu, code: int):
    """Run the routine for `code`; unknown codes fail before touching state."""
    try:
        handler = TRAP_HANDLERS[TrapCode(code)]
    except ValueError as e:
        raise UnsupportedTrapCode(code) from e
    handler(cpu)
