import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
EXAMPLE = "A Y\nB X\nC Z\n"


def main(*args: str, input_: str = "") -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(ROOT / "main.py"), *args],
        input=input_,
        capture_output=True,
        text=True,
        cwd=ROOT,
    )


@pytest.mark.parametrize("args, expected", [((), "15"), (("--part-2",), "12")])
def test_run_selects_rule_set(args, expected: str):
    result = main("run", *args, input_=EXAMPLE)
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == expected, (result.stdout, expected)


@pytest.mark.parametrize("args, expected", [((), "15"), (("--part-2",), "12")])
def test_run_reads_input_file(tmp_path: Path, args, expected: str):
    guide = tmp_path / "guide.txt"
    guide.write_text(EXAMPLE)
    result = main("run", "--input-file", str(guide), *args)
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == expected, (result.stdout, expected)


@pytest.mark.parametrize("args", [(), ("--part-2",)])
def test_run_empty_input_scores_zero(args):
    result = main("run", *args, input_="")
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "0"


@pytest.mark.parametrize(
    "input_, args, message",
    [
        ("A Y\nB\nC Z\n", (), "expected exactly 2 tokens on line 2: 'B'"),
        ("A Y\nQ X\n", ("--part-2",), "unrecognized action token on line 2: 'Q'"),
        ("A Q\n", ("--part-2",), "unrecognized outcome token on line 1: 'Q'"),
    ],
)
def test_run_bad_guide(input_: str, args, message: str):
    result = main("run", *args, input_=input_)
    assert result.returncode == 1
    assert result.stdout == ""
    error_lines = [line for line in result.stderr.splitlines() if "Bad strategy guide" in line]
    assert error_lines == [f"Bad strategy guide: {message}"], result.stderr
    assert "SystemExit" not in result.stderr
    assert "Traceback" not in result.stderr


def test_test_command():
    result = main("test")
    assert result.returncode == 0, result.stderr
    assert "Tests pass!" in result.stdout
