"""Bug classification and report rendering."""

from .classifier import TriagedBug, classify_bug, triage_bugs
from .report import (
    TriageReport,
    build_report,
    compare_triaged,
    group_by_assignee,
    render_report,
)

__all__ = [
    "TriagedBug",
    "TriageReport",
    "build_report",
    "classify_bug",
    "compare_triaged",
    "group_by_assignee",
    "render_report",
    "triage_bugs",
]
