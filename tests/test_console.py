import io

import pytest

from conftest import make_cpu, output_of
from lc3.console import Console, parse_num, parse_register
from lc3.errors import BadArgument, MissingArgument


def run_console(cpu, commands):
    out = io.StringIO()
    Console(cpu, stdin=io.StringIO(commands), stdout=out).loop()
    return out.getvalue()


def test_parse_num():
    assert parse_num(["10"], 0) == 10
    assert parse_num(["x10"], 0) == 16
    assert parse_num(["0x10"], 0) == 16
    assert parse_num(["ff"], 0) == 255
    assert parse_num(["-1"], 0) == -1
    with pytest.raises(MissingArgument):
        parse_num([], 0)
    with pytest.raises(BadArgument):
        parse_num(["xyz"], 0)


def test_parse_register():
    assert parse_register(["r3"], 0) == 3
    assert parse_register(["R7"], 0) == 7
    assert parse_register(["2"], 0) == 2
    with pytest.raises(BadArgument):
        parse_register(["rx"], 0)


def test_empty_line_steps():
    cpu = make_cpu([0x1042, 0x1042])
    run_console(cpu, "sr 1 5\nsr r2 3\n\nq\n")
    assert cpu.registers[0] == 8
    assert cpu.pc == 0x3001


def test_number_runs_cycles():
    cpu = make_cpu([0x1042, 0x1042, 0xF025])
    run_console(cpu, "5\nq\n")
    assert not cpu.running
    assert "halting CPU" in output_of(cpu)


def test_goto_and_set_memory():
    cpu = make_cpu()
    run_console(cpu, "g x4000\nsm x4000 xFFFF\ns x4001 7\ns r6 x20\n")
    assert cpu.pc == 0x4000
    assert cpu.mem.read(0x4000) == -1
    assert cpu.mem.read(0x4001) == 7
    assert cpu.registers[6] == 0x20


def test_errors_are_reported_and_loop_continues():
    cpu = make_cpu([0xD000])
    output = run_console(cpu, "frob\nsr 9 1\n\n0\nsr 1 4\nq\n")
    assert "frob is not a recognized command" in output
    assert "Invalid register 9" in output
    assert "reserved op code" in output
    assert cpu.registers[1] == 4


def test_help_and_dump():
    cpu = make_cpu([0x1042])
    output = run_console(cpu, "h\nd\n")
    assert "Simulator commands:" in output
    assert "PC = x3000" in output
    assert "x3000: x1042" in output


def test_end_of_input_quits():
    output = run_console(make_cpu(), "")
    assert output.endswith("Quitting simulator\n")


def test_halted_cpu_reports_not_running():
    cpu = make_cpu([0xF025])
    output = run_console(cpu, "\n\nq\n")
    assert "CPU is not currently running" in output


def test_non_ascii_digit_is_not_a_cycle_count():
    cpu = make_cpu([0x1042])
    output = run_console(cpu, "²\nsr 1 4\nq\n")
    assert "² is not a recognized command" in output
    assert cpu.registers[1] == 4
    assert cpu.pc == 0x3000
