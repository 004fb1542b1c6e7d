"""Bugzilla client package for API interaction."""

from .client import BugzillaAPIError, BugzillaClient
from .models import BugQuery, BugzillaBug, BugzillaFlag
from .search import BugSearcher, build_triage_query

__all__ = [
    "BugzillaAPIError",
    "BugzillaClient",
    "BugQuery",
    "BugzillaBug",
    "BugzillaFlag",
    "BugSearcher",
    "build_triage_query",
]
