"""Unit тесты для CLI.

Coverage:
- Код выхода 0 и одна строка в stdout при успехе
- Код выхода 1, пустой stdout и ERROR лог при сбое источника
- init_logging
- Запуск процесса: python -m src.multiplier и sys.exit(main())
"""

import io
import logging
import re
import subprocess
import sys
from pathlib import Path

import pytest

from src.multiplier import cli
from src.multiplier.logging_util import init_logging
from src.multiplier.random_source import RandomSource, SequenceRandomSource

PROJECT_ROOT = Path(__file__).resolve().parents[2]

REPORT_LINE = re.compile(r"^(\d+) x (\d+) = (\d+)$")


class UnavailableRandomSource(RandomSource):

    def randint(self, lower: int, upper: int) -> int:
        raise NotImplementedError("no entropy")


class TestRun:

    def test_success_exit_code_and_output(self, capsys):
        exit_code = cli.run(random_source=SequenceRandomSource([1_000_000, 999_999_999]))
        captured = capsys.readouterr()
        assert exit_code == cli.EXIT_OK == 0
        assert captured.out == "1000000 x 999999999 = 999999999000000\n"

    def test_failure_exit_code(self, capsys, caplog):
        with caplog.at_level(logging.ERROR, logger="src.multiplier.cli"):
            exit_code = cli.run(random_source=UnavailableRandomSource())
        captured = capsys.readouterr()
        assert exit_code == cli.EXIT_FATAL == 1
        assert captured.out == ""
        assert any("Fatal: Failed to draw number1" in r.getMessage() for r in caplog.records)
        assert all(r.levelno == logging.ERROR for r in caplog.records)


class TestMain:

    def test_main_prints_one_report_line(self, capsys, restore_root_level):
        exit_code = cli.main()
        captured = capsys.readouterr()
        assert exit_code == 0

        lines = captured.out.splitlines()
        assert len(lines) == 1
        match = REPORT_LINE.match(lines[0])
        assert match is not None

        number1, number2, product = (int(g) for g in match.groups())
        assert 1_000_000 <= number1 <= 999_999_999
        assert 1_000_000 <= number2 <= 999_999_999
        assert product == number1 * number2


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestInitLogging:

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level: loud"):
            init_logging("loud")

    def test_level_name_case_insensitive(self, restore_root_level):
        assert init_logging("WARNING") == logging.WARNING
        assert restore_root_level.getEffectiveLevel() == logging.WARNING

        assert init_logging("debug") == logging.DEBUG
        assert restore_root_level.getEffectiveLevel() == logging.DEBUG

    def test_handler_bound_to_stderr_by_default(self, monkeypatch, restore_root_level):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        init_logging("error")
        assert calls[0]["stream"] is sys.stderr
        assert calls[0]["level"] == logging.ERROR

    def test_explicit_stream(self, monkeypatch, restore_root_level):
        calls = []
        stream = io.StringIO()
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        init_logging("info", stream=stream)
        assert calls[0]["stream"] is stream


# =============================================================================
# ЗАПУСК ПРОЦЕССА
# =============================================================================

FAILING_ENTRYPOINT = """
import sys

from src.multiplier import cli, multiplier


class Unavailable:
    def randint(self, lower, upper):
        raise OSError("entropy source unavailable")


multiplier.default_random_source = lambda seed=None: Unavailable()
sys.exit(cli.main())
"""


def run_python(*args):
    return subprocess.run(
        [sys.executable, *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=60,
    )


class TestProcessEntrypoint:

    def test_module_entrypoint_success(self):
        completed = run_python("-m", "src.multiplier")
        assert completed.returncode == 0, completed.stderr

        lines = completed.stdout.splitlines()
        assert len(lines) == 1
        match = REPORT_LINE.match(lines[0])
        assert match is not None

        number1, number2, product = (int(g) for g in match.groups())
        assert 1_000_000 <= number1 <= 999_999_999
        assert 1_000_000 <= number2 <= 999_999_999
        assert product == number1 * number2
        assert completed.stderr == ""

    def test_main_through_sys_exit_on_fatal_error(self):
        completed = run_python("-c", FAILING_ENTRYPOINT)
        assert completed.returncode == 1
        assert completed.stdout == ""
        assert "ERROR:" in completed.stderr
        assert "Fatal: Failed to draw number1" in completed.stderr
