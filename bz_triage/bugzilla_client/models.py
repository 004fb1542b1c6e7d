"""Pydantic models for Bugzilla data structures.

These models map to the Bugzilla REST API bug search response.
API Reference: https://bugzilla.readthedocs.io/en/latest/api/core/v1/bug.html
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BugzillaFlag(BaseModel):
    """Bugzilla flag attached to a bug.

    Maps to the entries of the ``flags`` array of a Bug object.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Flag type name, e.g. 'needinfo' (string)")
    requestee: str = Field(
        "", description="Login of the person the flag is requested from (string)"
    )
    status: str = Field("", description="Flag status: '?', '+' or '-' (string)")
    setter: str = Field("", description="Login of the person who set the flag")

    @field_validator("requestee", "status", "setter", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class BugzillaBug(BaseModel):
    """Bugzilla bug model.

    Only the fields this tool reads are modelled; anything else in the
    payload is dropped.
    """

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Unique bug identifier (integer)")
    assigned_to: str = Field(
        "", description="Login of the assignee, empty when unassigned (string)"
    )
    severity: str = Field(
        "---", description="One of: urgent, high, ---, medium, low (string)"
    )
    status: str = Field("", description="Bug status, e.g. NEW, ASSIGNED (string)")
    summary: str = Field("", description="One-line bug summary (string)")
    target_release: list[str] = Field(
        default_factory=list, description="Target releases, '---' when unset"
    )
    flags: list[BugzillaFlag] = Field(
        default_factory=list, description="Flags in the order Bugzilla returns them"
    )

    @field_validator("assigned_to", "status", "summary", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("target_release", mode="before")
    @classmethod
    def _coerce_release_list(cls, value: Any) -> Any:
        # Older Bugzilla versions return a single string here
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class BugQuery(BaseModel):
    """Search filter sent to the Bugzilla ``/rest/bug`` endpoint."""

    product: list[str] = Field(default_factory=list)
    component: list[str] = Field(default_factory=list)
    status: list[str] = Field(default_factory=list)
    target_release: list[str] = Field(default_factory=list)
    include_fields: list[str] = Field(
        default_factory=list,
        description="When set, Bugzilla returns ONLY these fields on each bug",
    )

    def to_params(self) -> list[tuple[str, str]]:
        """Convert the query into REST query-string parameters.

        Multi-valued filters are repeated; ``include_fields`` is
        comma-joined and left out entirely when empty.
        """
        params: list[tuple[str, str]] = []
        params.extend(("product", value) for value in self.product)
        params.extend(("component", value) for value in self.component)
        params.extend(("bug_status", value) for value in self.status)
        params.extend(("target_release", value) for value in self.target_release)
        if self.include_fields:
            params.append(("include_fields", ",".join(self.include_fields)))
        return params
