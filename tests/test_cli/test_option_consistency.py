"""Tests for CLI option consistency across all commands."""

from typer.testing import CliRunner

from bz_triage.cli.main import app


class TestOptionConsistency:
    """Test that CLI options are consistent across commands."""

    def setup_method(self):
        """Set up test runner."""
        self.runner = CliRunner(env={"NO_COLOR": "1", "TERM": "dumb"})

    def test_help_shorthand_works_on_all_commands(self):
        """Test that -h works for --help on all commands."""
        for cmd in (["-h"], ["report", "-h"], ["version", "-h"]):
            result = self.runner.invoke(app, cmd)
            assert result.exit_code == 0, (
                f"Command {' '.join(cmd)} failed: {result.stdout}"
            )
            assert "Usage:" in result.stdout, (
                f"No help text in {' '.join(cmd)}: {result.stdout}"
            )

    def test_report_shorthands(self):
        """Test that report exposes its documented shorthands."""
        result = self.runner.invoke(app, ["report", "--help"])
        assert result.exit_code == 0
        for option in ("--verbose", "--api-key", "--team", "--dry-run"):
            assert option in result.stdout
