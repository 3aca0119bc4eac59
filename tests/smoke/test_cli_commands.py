"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work and that
invalid input exits with code 1.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def run_cli(tmp_path):
    """
    Run a CLI command against an isolated data directory.

    Returns:
        Callable taking the command (after 'python -m sempoa') and optional
        stdin text, returning (exit_code, stdout, stderr)
    """
    env = dict(os.environ)
    env.update(
        {
            "SEMPOA_DATA_DIR": str(tmp_path / "data"),
            "SEMPOA_STORAGE_BACKEND": "sqlite",
            "COLUMNS": "200",
            "PYTHONIOENCODING": "utf-8",
        }
    )
    env.pop("SEMPOA_DATABASE_URL", None)

    def _run(command: str, stdin: str | None = None, timeout: int = 30) -> tuple[int, str, str]:
        full_command = f"{sys.executable} -m sempoa {command}"
        result = subprocess.run(
            full_command,
            shell=True,
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            input=stdin,
            timeout=timeout,
            env=env,
            encoding="utf-8",
        )
        return result.returncode, result.stdout, result.stderr

    return _run


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self, run_cli):
        """Main help should list the commands."""
        code, stdout, stderr = run_cli("--help")

        assert code == 0, f"Help failed: {stderr}"
        for command in ("status", "levels", "select", "practice", "board", "classify", "reset"):
            assert command in stdout

    def test_practice_help(self, run_cli):
        code, stdout, stderr = run_cli("practice --help")

        assert code == 0, f"Help failed: {stderr}"
        assert "--count" in stdout


class TestProgressCommands:
    """Test progress inspection and level selection."""

    def test_status_fresh(self, run_cli):
        code, stdout, stderr = run_cli("status")

        assert code == 0, f"status failed: {stderr}"
        assert "Learning Journey" in stdout
        assert "0%" in stdout
        assert "addition-simple-single" in stdout
        assert "Simple Addition" in stdout

    def test_levels_filtered(self, run_cli):
        code, stdout, stderr = run_cli("levels --operation subtraction")

        assert code == 0, f"levels failed: {stderr}"
        assert "subtraction-both-five" in stdout
        assert "addition-simple-single" not in stdout

    def test_levels_unknown_operation(self, run_cli):
        code, stdout, _ = run_cli("levels --operation division")
        assert code == 1
        assert "Unknown operation" in stdout

    def test_select_current_level(self, run_cli):
        code, stdout, stderr = run_cli("select addition-simple-single")

        assert code == 0, f"select failed: {stderr}"
        assert "Addition Single Digit Simple" in stdout

    def test_select_locked_level(self, run_cli):
        code, stdout, _ = run_cli("select addition-simple-double")
        assert code == 1
        assert "locked" in stdout

    def test_select_unknown_level(self, run_cli):
        code, stdout, _ = run_cli("select addition-cousin-single")
        assert code == 1
        assert "Unknown level" in stdout

    def test_reset(self, run_cli):
        code, stdout, stderr = run_cli("reset --yes")

        assert code == 0, f"reset failed: {stderr}"
        assert "reset" in stdout.lower()


class TestPracticeCommands:
    """Test question generation and practice."""

    def test_question(self, run_cli):
        code, stdout, stderr = run_cli("question --difficulty double --operation subtraction --seed 7")

        assert code == 0, f"question failed: {stderr}"
        assert " - " in stdout
        assert "=" in stdout

    def test_question_unknown_difficulty(self, run_cli):
        code, stdout, _ = run_cli("question --difficulty six")
        assert code == 1
        assert "Unknown difficulty" in stdout

    def test_practice_records_attempt(self, run_cli):
        """A wrong answer (0 is never a valid sum) is recorded as an attempt."""
        code, stdout, stderr = run_cli("practice --count 1 --seed 1", stdin="0\n")

        assert code == 0, f"practice failed: {stderr}"
        assert "Not quite" in stdout
        assert "1 mistakes" in stdout

        code, stdout, _ = run_cli("levels --operation addition")
        assert code == 0


class TestBoardCommands:
    """Test board and classification output."""

    def test_board(self, run_cli):
        code, stdout, stderr = run_cli("board 23")

        assert code == 0, f"board failed: {stderr}"
        assert "7-lower-2" in stdout
        assert "8-lower-1" in stdout
        assert "5 active beads" in stdout

    def test_board_beyond_capacity(self, run_cli):
        code, stdout, _ = run_cli("board 10000000000")
        assert code == 1
        assert "cannot be shown" in stdout

    def test_classify(self, run_cli):
        code, stdout, stderr = run_cli("classify addition")

        assert code == 0, f"classify failed: {stderr}"
        assert "Big Friend" in stdout
        assert "Small Friend" in stdout

    def test_classify_mixed(self, run_cli):
        code, stdout, _ = run_cli("classify mixed")
        assert code == 1
