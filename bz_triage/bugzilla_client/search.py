"""Bugzilla query building for the triage report."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from .models import BugQuery, BugzillaBug

if TYPE_CHECKING:
    from ..config import TriageConfig

OPEN_STATUSES = ["NEW", "ASSIGNED", "POST", "ON_DEV"]

# Target release value Bugzilla uses for "not set"
UNSET_RELEASE = "---"

# Fields Bugzilla returns from a search when include_fields is not given.
# Once include_fields is set ONLY the listed fields come back, so the triage
# query starts from this list and adds to it.
DEFAULT_FIELDS = [
    "actual_time",
    "alias",
    "assigned_to",
    "assigned_to_detail",
    "blocks",
    "cc",
    "cc_detail",
    "cf_build_id",
    "cf_clone_of",
    "cf_conditional_nak",
    "cf_cust_facing",
    "cf_devel_whiteboard",
    "cf_doc_type",
    "cf_environment",
    "cf_fixed_in",
    "cf_internal_whiteboard",
    "cf_last_closed",
    "cf_partner",
    "cf_pgm_internal",
    "cf_pm_score",
    "cf_qa_whiteboard",
    "cf_qe_conditional_nak",
    "cf_release_notes",
    "cf_target_upstream_version",
    "cf_verified",
    "classification",
    "component",
    "creation_time",
    "creator",
    "creator_detail",
    "deadline",
    "depends_on",
    "docs_contact",
    "dupe_of",
    "estimated_time",
    "groups",
    "id",
    "is_cc_accessible",
    "is_confirmed",
    "is_creator_accessible",
    "is_open",
    "keywords",
    "last_change_time",
    "op_sys",
    "platform",
    "priority",
    "product",
    "qa_contact",
    "qa_contact_detail",
    "remaining_time",
    "resolution",
    "see_also",
    "severity",
    "status",
    "summary",
    "target_milestone",
    "target_release",
    "url",
    "version",
    "whiteboard",
]

# Every field the classifier and reporter read
REQUIRED_FIELDS = ["id", "assigned_to", "severity", "status", "flags"]

EXTRA_FIELDS = ["flags", "external_bugs"]


class BugSearcher(Protocol):
    """Anything that can run a BugQuery, e.g. BugzillaClient or a test fake."""

    def search(self, query: BugQuery) -> list[BugzillaBug]: ...


def build_include_fields(extra_fields: Iterable[str] | None = None) -> list[str]:
    """Build the include_fields list for a search.

    Args:
        extra_fields: Fields to request on top of the defaults

    Returns:
        DEFAULT_FIELDS, then extra fields, then any missing REQUIRED_FIELDS,
        without duplicates and in first-seen order

    Example:
        >>> build_include_fields(["flags"])[-1]
        'flags'
    """
    fields = [*DEFAULT_FIELDS, *(extra_fields or []), *REQUIRED_FIELDS]
    return list(dict.fromkeys(fields))


def build_triage_query(
    config: "TriageConfig", extra_fields: Iterable[str] | None = None
) -> BugQuery:
    """Build the open-bug query for the configured product and component.

    Args:
        config: Deployment configuration (product, component, releases)
        extra_fields: Fields to request in addition to DEFAULT_FIELDS;
            defaults to EXTRA_FIELDS

    Returns:
        BugQuery restricted to open statuses and the unset, current and
        next target releases
    """
    if extra_fields is None:
        extra_fields = EXTRA_FIELDS

    return BugQuery(
        product=[config.product],
        component=[config.component],
        status=list(OPEN_STATUSES),
        target_release=[UNSET_RELEASE, config.current_release, config.next_release],
        include_fields=build_include_fields(extra_fields),
    )
