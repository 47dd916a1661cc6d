"""Tests for snake_tui.cli"""
import sys

import pytest
from typer.testing import CliRunner

from snake_tui.cli import app
from snake_tui.config import VERSION

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ROWS", "COLS", "TICK_MS", "WALL_MODE", "GLYPHS", "COLOR", "LOG", "WRITE_LOG"):
        monkeypatch.delenv(f"SNAKE_TUI_{name}", raising=False)


class TestCli:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--walls" in result.output

    def test_invalid_size(self):
        result = runner.invoke(app, ["--rows", "2"])
        assert result.exit_code == 2
        assert "at least" in result.output

    def test_invalid_wall_mode(self):
        result = runner.invoke(app, ["--walls", "rubber"])
        assert result.exit_code == 2
        assert "wall mode" in result.output

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX terminal path")
    def test_without_tty_exits_cleanly(self):
        result = runner.invoke(app, ["--no-menu"])
        assert result.exit_code == 1
        assert "cannot control the terminal" in result.output

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX terminal path")
    def test_log_file_records_failure(self, tmp_path):
        log = tmp_path / "snake.log"
        result = runner.invoke(app, ["--no-menu", "--log-file", str(log)])
        assert result.exit_code == 1
