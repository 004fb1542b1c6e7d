"""Test main CLI functionality."""

from typer.testing import CliRunner

from bz_triage.cli.main import app

runner = CliRunner()


def test_version_command() -> None:
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "Bugzilla Triage Report v" in result.stdout


def test_help_lists_commands() -> None:
    """Test -h shorthand and the registered commands."""
    result = runner.invoke(app, ["-h"])
    assert result.exit_code == 0
    assert "report" in result.stdout
    assert "version" in result.stdout
