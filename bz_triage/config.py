"""Deployment configuration for the triage report."""

import logging
import os

from pydantic import BaseModel, Field, field_validator

from .bugzilla_client.client import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_TEAM = frozenset({"chuffman", "fbertina", "hekumar", "jsafrane", "tsmetana"})


def parse_team(value: str) -> frozenset[str]:
    """Parse a comma-separated list of logins, dropping blanks."""
    return frozenset(login.strip() for login in value.split(",") if login.strip())


class TriageConfig(BaseModel):
    """Which bugs to fetch and who counts as the team.

    Release and team values are compared with exact string equality.
    """

    base_url: str = Field(DEFAULT_BASE_URL, description="Bugzilla root URL")
    product: str = Field("OpenShift Container Platform")
    component: str = Field("Storage")
    current_release: str = Field("4.6.0")
    next_release: str = Field("4.7.0")
    team: frozenset[str] = Field(
        DEFAULT_TEAM, description="Logins treated as internal for needinfo triage"
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("team")
    @classmethod
    def _drop_blank_logins(cls, value: frozenset[str]) -> frozenset[str]:
        # An empty requestee means "unset" and must never match the team
        team = frozenset(login for login in value if login.strip())
        if not team:
            logger.warning(
                "Team is empty; every needinfo flag will count as outside the team"
            )
        return team

    @classmethod
    def from_env(cls) -> "TriageConfig":
        """Build configuration from BZ_TRIAGE_* environment variables.

        Unset variables keep the defaults.
        """
        overrides: dict[str, object] = {}
        for field in (
            "base_url",
            "product",
            "component",
            "current_release",
            "next_release",
        ):
            value = os.getenv(f"BZ_TRIAGE_{field.upper()}")
            if value:
                overrides[field] = value

        team = os.getenv("BZ_TRIAGE_TEAM")
        if team:
            overrides["team"] = parse_team(team)

        return cls(**overrides)
