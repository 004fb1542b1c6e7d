"""Test configuration and fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from bz_triage.bugzilla_client.models import BugQuery, BugzillaBug, BugzillaFlag


class FakeSearcher:
    """In-memory stand-in for BugzillaClient."""

    def __init__(
        self, bugs: list[BugzillaBug] | None = None, error: Exception | None = None
    ) -> None:
        self.bugs = bugs or []
        self.error = error
        self.queries: list[BugQuery] = []

    def search(self, query: BugQuery) -> list[BugzillaBug]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.bugs)


@pytest.fixture
def make_bug() -> Callable[..., BugzillaBug]:
    """Factory for bugs with sensible defaults."""

    def _make_bug(
        bug_id: int,
        assignee: str = "alice",
        severity: str = "medium",
        status: str = "NEW",
        flags: list[tuple[str, str]] | None = None,
        **extra: Any,
    ) -> BugzillaBug:
        return BugzillaBug(
            id=bug_id,
            assigned_to=assignee,
            severity=severity,
            status=status,
            flags=[
                BugzillaFlag(name=name, requestee=requestee)
                for name, requestee in (flags or [])
            ],
            **extra,
        )

    return _make_bug


@pytest.fixture
def fake_searcher() -> type[FakeSearcher]:
    return FakeSearcher
