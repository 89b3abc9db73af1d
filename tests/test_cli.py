from __future__ import annotations

from unittest import mock

from manual_harness import __main__ as cli
from manual_harness.errors import ManualTestFailed
from manual_harness.result import TestResult


def test_cli_passes_inline_text(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.delenv("MANUAL_TEST_TIMEOUT", raising=False)
    with mock.patch.object(cli, "run_manual_test", return_value=TestResult.passed()) as run:
        code = cli.main(["--name", "T", "--text", "Press Pass", "--timeout", "2",
                         "--output-dir", str(tmp_path)])

    assert code == 0
    args, kwargs = run.call_args
    assert args == ("T", None, "Press Pass")
    assert kwargs["config"].timeout_minutes == 2
    assert kwargs["config"].output_dir == tmp_path
    assert "T: passed" in capsys.readouterr().out


def test_cli_reads_instructions_file(tmp_path) -> None:
    instructions = tmp_path / "steps.txt"
    instructions.write_text("1. Open the dialog\n", encoding="utf-8")
    with mock.patch.object(cli, "run_manual_test", return_value=TestResult.passed()) as run:
        code = cli.main(["--name", "Dialog", "--header", "Wait", "--instructions", str(instructions)])

    assert code == 0
    assert run.call_args.args == ("Dialog", "Wait", "1. Open the dialog\n")


def test_cli_reports_failure(capsys) -> None:
    with mock.patch.object(cli, "run_manual_test", side_effect=ManualTestFailed("broken")):
        code = cli.main(["--name", "T", "--text", "x"])

    assert code == 1
    assert "Test failed! broken" in capsys.readouterr().err


def test_cli_missing_instructions_file(tmp_path, capsys) -> None:
    code = cli.main(["--name", "T", "--instructions", str(tmp_path / "missing.txt")])
    assert code == 2
    assert "missing.txt" in capsys.readouterr().err
