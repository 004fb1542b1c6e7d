"""Standardized CLI option definitions for the triage commands."""

import typer

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Verbose (debug) logging on stderr"
)

API_KEY_OPTION = typer.Option(
    None,
    "--api-key",
    "-k",
    help="Bugzilla API key (defaults to BUGZILLA_API_KEY env var)",
)

BASE_URL_OPTION = typer.Option(
    None, "--base-url", help="Bugzilla root URL (defaults to BZ_TRIAGE_BASE_URL)"
)

PRODUCT_OPTION = typer.Option(None, "--product", "-p", help="Bugzilla product name")

COMPONENT_OPTION = typer.Option(
    None, "--component", "-c", help="Bugzilla component name"
)

CURRENT_RELEASE_OPTION = typer.Option(
    None, "--current-release", help="Target release of the current version"
)

NEXT_RELEASE_OPTION = typer.Option(
    None, "--next-release", help="Target release of the next version"
)

TEAM_OPTION = typer.Option(
    None,
    "--team",
    "-t",
    help="Team member login (can be used multiple times or comma-separated)",
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Print the search request without sending it"
)
