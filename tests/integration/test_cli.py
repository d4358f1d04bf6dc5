"""
Integration tests for the eztest CLI.

Tests cover:
- The demo command output and exit status
- Command line overrides of the configuration
- Configuration display and configuration errors
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from eztest import __version__
from eztest.cli import main
from eztest.errors import InvalidStateError


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, project: Path, *args: str):
    return runner.invoke(main, ["--project", str(project), *args])


class TestDemoCommand:
    """Tests for `eztest demo`."""

    def test_demo_output(self, runner: CliRunner, tmp_path: Path):
        result = invoke(runner, tmp_path, "demo", "--slow-iterations", "10")

        assert result.exit_code == 1
        lines = result.stdout.splitlines()
        assert lines[0].startswith("This test should pass... PASS (")
        assert lines[1] == "This test should fail..."
        assert lines[2] == "  FAILED [2]: expected 1, got 0"
        assert lines[3].startswith("This test should fail... FAIL (")
        assert lines[4].startswith("This test should take a while... PASS (")
        assert lines[5:] == [
            "===================================",
            "ASSERTIONS FAILED:          1",
            "ASSERTIONS MADE:            3",
            "===================================",
        ]

    def test_zero_cap_from_command_line(self, runner: CliRunner, tmp_path: Path):
        result = invoke(runner, tmp_path, "demo", "-n", "1", "--max-reported-failures", "0")

        assert result.exit_code == 1
        assert "FAILED [" not in result.stdout
        assert "[1 other failures omitted]" in result.stdout

    def test_cap_from_project_config(self, runner: CliRunner, tmp_path: Path):
        (tmp_path / "eztest.toml").write_text(
            "[output]\nmax_reported_failures = 0\n[demo]\nslow_iterations = 1\n"
        )

        result = invoke(runner, tmp_path, "demo")

        assert "[1 other failures omitted]" in result.stdout

    def test_verbose(self, runner: CliRunner, tmp_path: Path):
        result = invoke(runner, tmp_path, "--verbose", "demo", "-n", "1")

        assert result.exit_code == 1
        assert "ASSERTIONS MADE:            3" in result.output

    def test_negative_iterations_rejected(self, runner: CliRunner, tmp_path: Path):
        result = invoke(runner, tmp_path, "demo", "-n", "-3")

        assert result.exit_code == 2

    def test_large_iterations_accepted_from_config(self, runner: CliRunner, tmp_path: Path):
        (tmp_path / "eztest.toml").write_text("[demo]\nslow_iterations = 200000\n")

        result = invoke(runner, tmp_path, "config")

        assert result.exit_code == 0
        assert "200000" in result.stdout

    def test_stopwatch_misuse_reported(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        def misuse(cx, slow_iterations):
            raise InvalidStateError("Stopwatch: stop() called while not running")

        monkeypatch.setattr("eztest.cli.run_demo", misuse)

        result = invoke(runner, tmp_path, "demo")

        assert result.exit_code == 2
        assert "not running" in result.output
        assert not isinstance(result.exception, InvalidStateError)


class TestConfigCommand:
    """Tests for `eztest config`."""

    def test_shows_settings(self, runner: CliRunner, tmp_path: Path):
        result = invoke(runner, tmp_path, "config")

        assert result.exit_code == 0
        assert "output.max_reported_failures" in result.stdout
        assert "demo.slow_iterations" in result.stdout

    def test_explicit_config_file(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"output": {"sequence_style": "braces"}}))

        result = runner.invoke(main, ["--config", str(path), "config"])

        assert result.exit_code == 0
        assert "braces" in result.stdout

    def test_unsupported_config_file(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "settings.ini"
        path.write_text("")

        result = runner.invoke(main, ["--config", str(path), "config"])

        assert result.exit_code == 2
        assert "Unsupported config format" in result.output

    def test_invalid_config_values(self, runner: CliRunner, tmp_path: Path):
        (tmp_path / "eztest.toml").write_text("[output]\nmax_reported_failures = -1\n")

        result = invoke(runner, tmp_path, "config")

        assert result.exit_code == 2


def test_version(runner: CliRunner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
