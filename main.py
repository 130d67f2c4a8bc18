"""Application entry-point for the LC-3 simulator.
Run `python main.py program.hex` for the console, add `--gui` for the window."""
import sys

from lc3.cli import main

if __name__ == "__main__":
    sys.exit(main())
