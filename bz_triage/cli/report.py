"""CLI command printing the per-assignee triage report."""

import logging

import httpx
import typer
from dotenv import load_dotenv
from rich.console import Console

from ..bugzilla_client.client import BugzillaAPIError, BugzillaClient
from ..bugzilla_client.search import build_triage_query
from ..config import TriageConfig, parse_team
from ..triage.pipeline import run_triage
from ..triage.report import render_report
from ..utils.log_setup import setup_logging
from .options import (
    API_KEY_OPTION,
    BASE_URL_OPTION,
    COMPONENT_OPTION,
    CURRENT_RELEASE_OPTION,
    DRY_RUN_OPTION,
    NEXT_RELEASE_OPTION,
    PRODUCT_OPTION,
    TEAM_OPTION,
    VERBOSE_OPTION,
)

logger = logging.getLogger(__name__)
err_console = Console(stderr=True, soft_wrap=True)


def load_config(
    base_url: str | None = None,
    product: str | None = None,
    component: str | None = None,
    current_release: str | None = None,
    next_release: str | None = None,
    team: list[str] | None = None,
) -> TriageConfig:
    """Environment configuration with command-line overrides applied."""
    config = TriageConfig.from_env()
    overrides: dict[str, object] = {
        name: value
        for name, value in (
            ("base_url", base_url),
            ("product", product),
            ("component", component),
            ("current_release", current_release),
            ("next_release", next_release),
        )
        if value
    }
    if team:
        overrides["team"] = parse_team(",".join(team))
    if not overrides:
        return config
    return TriageConfig.model_validate({**config.model_dump(), **overrides})


def report(
    verbose: bool = VERBOSE_OPTION,
    api_key: str | None = API_KEY_OPTION,
    base_url: str | None = BASE_URL_OPTION,
    product: str | None = PRODUCT_OPTION,
    component: str | None = COMPONENT_OPTION,
    current_release: str | None = CURRENT_RELEASE_OPTION,
    next_release: str | None = NEXT_RELEASE_OPTION,
    team: list[str] | None = TEAM_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
) -> None:
    """Print open bugs per assignee, with ignored bugs marked.

    Bugs with low severity, or waiting on a needinfo from someone outside
    the team, are listed but not counted as active.

    Examples:
        bz-triage report
        bz-triage report -v --component Storage --team alice --team bob
        bz-triage report --dry-run
    """
    load_dotenv()
    setup_logging(verbose)

    config = load_config(
        base_url=base_url,
        product=product,
        component=component,
        current_release=current_release,
        next_release=next_release,
        team=team,
    )
    logger.debug("Configuration: %s", config)

    if dry_run:
        query = build_triage_query(config)
        request = httpx.Request(
            "GET", f"{config.base_url}/rest/bug", params=query.to_params()
        )
        typer.echo(f"GET {request.url}")
        return

    try:
        client = BugzillaClient(api_key=api_key, base_url=config.base_url)
    except ValueError as e:
        err_console.print(f"❌ {e}", style="red", markup=False)
        raise typer.Exit(1)

    logger.info(
        "Searching %s for %s/%s", config.base_url, config.product, config.component
    )
    try:
        triage_report = run_triage(client, config)
    except BugzillaAPIError as e:
        err_console.print(f"❌ Failed to list bugs: {e}", style="red", markup=False)
        raise typer.Exit(1)

    for line in render_report(triage_report):
        typer.echo(line)
