"""Triage rules deciding which bugs count as active work."""

from collections.abc import Iterable, Set

from pydantic import BaseModel, ConfigDict

from ..bugzilla_client.models import BugzillaBug

NEEDINFO_FLAG = "needinfo"
LOW_SEVERITY = "low"


class TriagedBug(BaseModel):
    """A bug together with its triage decision."""

    model_config = ConfigDict(frozen=True)

    bug: BugzillaBug
    ignored: bool = False
    ignore_reason: str = ""


def classify_bug(bug: BugzillaBug, team: Set[str]) -> tuple[bool, str]:
    """Decide whether a bug is ignored and why.

    Rules are checked in order and the first match wins:

    1. Low severity bugs are ignored with reason ``low``.
    2. A ``needinfo`` flag requested from someone outside ``team`` ignores
       the bug with reason ``needinfo:<requestee>``. Only the first such
       flag counts. An empty requestee is never a team member.
    3. Everything else is active.

    Args:
        bug: Bug to classify
        team: Logins considered internal

    Returns:
        Tuple of (ignored, reason); reason is empty when not ignored
    """
    if bug.severity == LOW_SEVERITY:
        return True, LOW_SEVERITY

    for flag in bug.flags:
        if flag.name != NEEDINFO_FLAG:
            continue
        if not flag.requestee or flag.requestee not in team:
            return True, f"{NEEDINFO_FLAG}:{flag.requestee}"

    return False, ""


def triage_bugs(bugs: Iterable[BugzillaBug], team: Set[str]) -> list[TriagedBug]:
    """Classify bugs, keeping their fetch order."""
    triaged = []
    for bug in bugs:
        ignored, reason = classify_bug(bug, team)
        triaged.append(TriagedBug(bug=bug, ignored=ignored, ignore_reason=reason))
    return triaged
