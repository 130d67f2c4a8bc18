"""Interactive command loop driving a CPU from a terminal."""
import logging
import sys

from .dump import format_all
from .errors import BadArgument, LC3Error, MissingArgument, UnrecognizedCommand

logger = logging.getLogger(__name__)

PROMPT = "> "
HELP = """Simulator commands:
    h or ? to print this message
    q to quit
    d to print (dump) the cpu info
    g [address] to make the PC go to the new address
    sm [address] [value] to set the value of a memory address
    sr [reg_num] [value] to set the value of a register
    *Press return to execute a single instruction cycle
    *Enter an integer to execute that many instruction cycles
    NOTE: Addresses and values may be decimal or hex (xNNNN)"""


def parse_num(words, index: int) -> int:
    """Decimal first, then hex with an optional x/0x prefix."""
    try:
        arg = words[index]
    except IndexError:
        raise MissingArgument() from None
    try:
        return int(arg)
    except ValueError:
        pass
    text = arg.lower()
    if text.startswith("0x"):
        text = text[2:]
    elif text.startswith("x"):
        text = text[1:]
    try:
        return int(text, 16)
    except ValueError:
        raise BadArgument(arg) from None


def parse_register(words, index: int) -> int:
    try:
        arg = words[index]
    except IndexError:
        raise MissingArgument() from None
    if arg[:1].lower() == "r":
        arg = arg[1:]
    try:
        return int(arg)
    except ValueError:
        raise BadArgument(words[index]) from None


class Console:
    def __init__(self, cpu, stdin=None, stdout=None):
        self.cpu = cpu
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def print(self, text: str = ""):
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def loop(self):
        """Read and run commands until `q` or end of input."""
        self.print("Beginning execution; type h for help")
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            try:
                if self.execute(line):
                    break
            except LC3Error as e:
                logger.warning("command %r failed: %s", line.strip(), e)
                self.print(f"Error: {e}")
        self.print("Quitting simulator")

    def execute(self, line: str) -> bool:
        """Run one command line; returns True when the user asked to quit."""
        words = line.split()
        if not words:
            self.cpu.step()
            return False

        cmd = words[0].lower()
        args = words[1:]
        if cmd.isdecimal():
            cycles = int(cmd)
            if cycles <= 0:
                raise BadArgument(cmd)
            self.cpu.run(cycles)
        elif cmd in ("h", "?"):
            self.print(HELP)
        elif cmd == "q":
            return True
        elif cmd == "d":
            self.print(format_all(self.cpu))
        elif cmd == "g":
            self.cpu.set_program_counter(parse_num(args, 0))
        elif cmd == "sr":
            self.cpu.set_register(parse_register(args, 0), parse_num(args, 1))
        elif cmd == "sm":
            self.cpu.set_memory(parse_num(args, 0), parse_num(args, 1))
        elif cmd == "s":
            # `s rN value` or `s address value`
            if args and args[0][:1].lower() == "r":
                self.cpu.set_register(parse_register(args, 0), parse_num(args, 1))
            else:
                self.cpu.set_memory(parse_num(args, 0), parse_num(args, 1))
        else:
            raise UnrecognizedCommand(words[0])
        return False
