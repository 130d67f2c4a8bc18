"""Command-line entry point: `lc3sim program.hex [--gui | --run N]`."""
import argparse
import logging
import sys

from .console import Console
from .cpu_core import CPU
from .dump import format_all
from .errors import LC3Error
from .program import Program

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lc3sim", description="LC-3 instruction-set simulator")
    parser.add_argument("program", nargs="?", help="program image (.hex): origin then one word per line")
    parser.add_argument("--gui", action="store_true", help="open the PySide6 front end")
    parser.add_argument("--run", type=int, metavar="N",
                        help="run up to N cycles, dump the machine and exit")
    parser.add_argument("--verbose", action="store_true", help="log an instruction trace")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    program = None
    if args.program:
        try:
            program = Program.from_file(args.program)
        except (OSError, LC3Error) as e:
            logger.error("cannot load %s: %s", args.program, e)
            print(f"Failed to load '{args.program}': {e}", file=sys.stderr)
            return 1

    if args.gui:
        from lc3_gui.main_window import run
        return run(program)

    cpu = CPU()
    if program is not None:
        cpu.load_program(program)

    if args.run is not None:
        try:
            cpu.run(args.run)
        except LC3Error as e:
            logger.error("run stopped at x%04X after %d cycles: %s", cpu.pc, cpu.cycles, e)
            print(f"\nExecution stopped: {e}", file=sys.stderr)
            print(format_all(cpu))
            return 1
        print(format_all(cpu))
        return 0

    print("LC3 Simulator")
    Console(cpu).loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
