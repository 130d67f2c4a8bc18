import io

import pytest

from lc3.cpu_core import CPU
from lc3.traps import StreamConsole


def make_cpu(words=(), start=0x3000, stdin=""):
    """CPU with `words` loaded at `start` and an in-memory console."""
    cpu = CPU(console=StreamConsole(io.StringIO(stdin), io.StringIO()))
    cpu.load(start, words)
    return cpu


def output_of(cpu) -> str:
    return cpu.console.stdout.getvalue()


@pytest.fixture
def cpu():
    return make_cpu()
