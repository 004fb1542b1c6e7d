"""Main CLI entry point."""

import typer
from rich.console import Console

from .report import report

app = typer.Typer(
    name="bz-triage",
    help="Bugzilla triage report per assignee",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="report", context_settings={"help_option_names": ["-h", "--help"]})(
    report
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from bz_triage import __version__

    console.print(f"Bugzilla Triage Report v{__version__}")


if __name__ == "__main__":
    app()
