"""Grouping, ordering and rendering of the per-assignee triage report."""

from collections.abc import Iterable
from functools import cmp_to_key

from pydantic import BaseModel, Field

from .classifier import TriagedBug

SEVERITY_RANK = {
    "urgent": 1,
    "high": 2,
    "---": 3,
    "medium": 4,
    "low": 5,
}

# Severities outside SEVERITY_RANK sort ahead of urgent so they get looked at
UNKNOWN_SEVERITY_RANK = 0

BUGLIST_PATH = "/buglist.cgi?f1=bug_id&list_id=11351541&o1=anyexact&v1="
ID_SEPARATOR = "%2C"


def severity_rank(severity: str) -> int:
    return SEVERITY_RANK.get(severity, UNKNOWN_SEVERITY_RANK)


def compare_triaged(a: TriagedBug, b: TriagedBug) -> int:
    """Order bugs within an assignee's list.

    Active bugs come before ignored ones, then by ascending severity rank,
    then by ascending bug id.

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` does, 0 if equal
    """
    if a.ignored != b.ignored:
        return 1 if a.ignored else -1

    rank_a = severity_rank(a.bug.severity)
    rank_b = severity_rank(b.bug.severity)
    if rank_a != rank_b:
        return rank_a - rank_b

    return (a.bug.id > b.bug.id) - (a.bug.id < b.bug.id)


def sort_group(bugs: Iterable[TriagedBug]) -> list[TriagedBug]:
    return sorted(bugs, key=cmp_to_key(compare_triaged))


def group_by_assignee(triaged: Iterable[TriagedBug]) -> dict[str, list[TriagedBug]]:
    """Bucket bugs by exact assignee login, keeping fetch order in each bucket.

    An empty login is its own bucket.
    """
    groups: dict[str, list[TriagedBug]] = {}
    for item in triaged:
        groups.setdefault(item.bug.assigned_to, []).append(item)
    return groups


def buglist_url(base_url: str, bug_ids: Iterable[int]) -> str:
    """Build a Bugzilla list view URL showing the given bugs.

    Example:
        >>> buglist_url("https://bugzilla.redhat.com", [1, 2])
        'https://bugzilla.redhat.com/buglist.cgi?f1=bug_id&list_id=11351541&o1=anyexact&v1=1%2C2'
    """
    ids = ID_SEPARATOR.join(str(bug_id) for bug_id in bug_ids)
    return f"{base_url.rstrip('/')}{BUGLIST_PATH}{ids}"


def show_bug_url(base_url: str, bug_id: int) -> str:
    return f"{base_url.rstrip('/')}/show_bug.cgi?id={bug_id}"


class AssigneeSection(BaseModel):
    """One assignee's sorted bugs."""

    assignee: str
    bugs: list[TriagedBug] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.bugs)

    @property
    def ignored(self) -> int:
        return sum(1 for item in self.bugs if item.ignored)

    @property
    def active(self) -> int:
        return self.total - self.ignored


class TriageReport(BaseModel):
    """Sorted sections plus totals, ready to render."""

    base_url: str
    sections: list[AssigneeSection] = Field(default_factory=list)

    @property
    def grand_total(self) -> int:
        return sum(section.total for section in self.sections)

    @property
    def ignored_total(self) -> int:
        return sum(section.ignored for section in self.sections)

    @property
    def active_total(self) -> int:
        return self.grand_total - self.ignored_total


def build_report(triaged: Iterable[TriagedBug], base_url: str) -> TriageReport:
    """Group bugs per assignee and sort assignees and their bugs."""
    groups = group_by_assignee(triaged)
    sections = [
        AssigneeSection(assignee=assignee, bugs=sort_group(groups[assignee]))
        for assignee in sorted(groups)
    ]
    return TriageReport(base_url=base_url, sections=sections)


def render_section(section: AssigneeSection, base_url: str) -> list[str]:
    lines = [
        f"{section.assignee}: {section.active}/{section.total}: "
        f"{buglist_url(base_url, (item.bug.id for item in section.bugs))}"
    ]
    for item in section.bugs:
        reason = f"[{item.ignore_reason}]" if item.ignored else ""
        lines.append(
            f"\t {reason} {item.bug.status} {show_bug_url(base_url, item.bug.id)}"
        )
    lines.append("")
    return lines


def render_report(report: TriageReport) -> list[str]:
    """Render the report as text lines (without trailing newlines).

    Each assignee gets a summary line, one line per bug and a blank
    separator line; the last line carries the overall active/total count.
    """
    lines: list[str] = []
    for section in report.sections:
        lines.extend(render_section(section, report.base_url))
    lines.append(f"Total: {report.active_total}/{report.grand_total}")
    return lines
