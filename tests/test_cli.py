from lc3.cli import main


def write_program(tmp_path, text):
    path = tmp_path / "prog.hex"
    path.write_text(text)
    return str(path)


def test_run_and_dump(tmp_path, capsys):
    path = write_program(tmp_path, "3000\nE003\nF025\n")
    assert main([path, "--run", "10"]) == 0
    out = capsys.readouterr().out
    assert "Trap halt reached" in out
    assert "PC = x3002" in out
    assert "RUNNING: 0" in out


def test_run_reports_failure(tmp_path, capsys):
    path = write_program(tmp_path, "3000\nD000\n")
    assert main([path, "--run", "5"]) == 1
    captured = capsys.readouterr()
    assert "reserved op code" in captured.err


def test_bad_program_file(tmp_path, capsys):
    path = write_program(tmp_path, "origin\n")
    assert main([path, "--run", "1"]) == 1
    assert "invalid header" in capsys.readouterr().err


def test_missing_program_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.hex")]) == 1
    assert "Failed to load" in capsys.readouterr().err


def test_failures_are_logged(tmp_path, caplog):
    path = write_program(tmp_path, "3000\nD000\n")
    assert main([path, "--run", "5"]) == 1
    assert "run stopped at x3001 after 0 cycles" in caplog.text
    assert main([str(tmp_path / "missing.hex")]) == 1
    assert "cannot load" in caplog.text
