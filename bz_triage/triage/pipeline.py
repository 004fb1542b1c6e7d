"""Fetch, classify and group in one call."""

import logging

from ..bugzilla_client.search import BugSearcher, build_triage_query
from ..config import TriageConfig
from .classifier import triage_bugs
from .report import TriageReport, build_report

logger = logging.getLogger(__name__)


def run_triage(searcher: BugSearcher, config: TriageConfig) -> TriageReport:
    """Fetch the configured bugs and build the triage report.

    Errors raised by ``searcher`` propagate unchanged; nothing is
    reported for a failed search.
    """
    bugs = searcher.search(build_triage_query(config))
    triaged = triage_bugs(bugs, config.team)
    ignored = sum(1 for item in triaged if item.ignored)
    logger.debug("Classified %d bugs, %d ignored", len(triaged), ignored)
    return build_report(triaged, config.base_url)
