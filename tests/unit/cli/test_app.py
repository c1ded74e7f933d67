"""Tests for the main CLI application."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from closestmatch import __version__
from closestmatch.cli.app import app
from closestmatch.cli.context import CLIContext

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"closestmatch {__version__}" in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without a command prints usage."""
        result = runner.invoke(app, [])

        assert "Usage" in result.output

    def test_lists_commands(self) -> None:
        """Top-level help lists every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("distance", "find", "explain", "config"):
            assert command in result.stdout

    @pytest.mark.usefixtures("default_config")
    def test_verbose_enables_debug_logs(self) -> None:
        """-v turns on debug logging."""
        result = runner.invoke(app, ["-v", "find", "dag", "dog", "pumpkin"])

        assert result.exit_code == 0
        assert CLIContext.get().verbose is True
        assert "closest_match_found" in result.output

    @pytest.mark.usefixtures("default_config")
    def test_quiet_suppresses_info(self) -> None:
        """-q hides informational hints but keeps errors."""
        result = runner.invoke(app, ["-q", "find", "x"])

        assert result.exit_code == 1
        assert CLIContext.get().quiet is True
        assert "No candidates to match against" in result.output
        assert "Pass candidates as arguments" not in result.output
