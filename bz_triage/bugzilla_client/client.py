"""Bugzilla REST API client using httpx."""

import logging
import os
from typing import Any

import httpx
from pydantic import ValidationError

from .. import __version__
from .models import BugQuery, BugzillaBug

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "BUGZILLA_API_KEY"
DEFAULT_BASE_URL = "https://bugzilla.redhat.com"


class BugzillaAPIError(Exception):
    """Raised when a Bugzilla request fails or returns an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BugzillaClient:
    """Bugzilla API client with API key authentication."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize Bugzilla client with authentication.

        Args:
            api_key: Bugzilla API key. If None, reads from BUGZILLA_API_KEY
                env var.
            base_url: Root URL of the Bugzilla instance
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_key = api_key or os.getenv(API_KEY_ENV_VAR)
        if not self.api_key:
            raise ValueError(
                f"{API_KEY_ENV_VAR} environment variable must be set "
                f"({base_url.rstrip('/')}/userprefs.cgi?tab=apikey)"
            )

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "X-BUGZILLA-API-KEY": self.api_key,
            "User-Agent": f"bugzilla-triage-report/{__version__}",
            "Accept": "application/json",
        }

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/rest/bug"

    def search(self, query: BugQuery) -> list[BugzillaBug]:
        """Search for bugs matching a query.

        Args:
            query: Filter describing which bugs to return

        Returns:
            List of BugzillaBug objects in the order Bugzilla returned them

        Raises:
            BugzillaAPIError: On transport failure, non-2xx responses, a
                Bugzilla error payload, or a payload that cannot be parsed
        """
        params = query.to_params()
        logger.debug("GET %s params=%s", self.search_url, params)

        try:
            with httpx.Client(
                headers=self.headers, timeout=self.timeout, transport=self.transport
            ) as http:
                response = http.get(self.search_url, params=params)
        except httpx.HTTPError as e:
            raise BugzillaAPIError(f"Request to {self.search_url} failed: {e}") from e

        payload = self._decode(response)
        raw_bugs = payload.get("bugs", [])
        if not isinstance(raw_bugs, list):
            raise BugzillaAPIError(
                "Unexpected response: 'bugs' is not a list", response.status_code
            )

        try:
            bugs = [BugzillaBug.model_validate(raw) for raw in raw_bugs]
        except ValidationError as e:
            raise BugzillaAPIError(
                f"Could not parse bug data: {e}", response.status_code
            ) from e

        logger.debug("Bugzilla returned %d bugs", len(bugs))
        return bugs

    def _decode(self, response: httpx.Response) -> dict[str, Any]:
        """Decode a JSON response, converting Bugzilla errors to exceptions."""
        try:
            payload = response.json()
        except ValueError:
            payload = None

        # Bugzilla reports errors as {"error": true, "message": ..., "code": ...}
        if isinstance(payload, dict) and payload.get("error"):
            message = payload.get("message") or "unknown error"
            code = payload.get("code")
            detail = f"Bugzilla error {code}: {message}" if code else message
            raise BugzillaAPIError(detail, response.status_code)

        if response.is_error:
            raise BugzillaAPIError(
                f"HTTP {response.status_code} from {self.search_url}",
                response.status_code,
            )

        if not isinstance(payload, dict):
            raise BugzillaAPIError(
                "Response body is not a JSON object", response.status_code
            )
        return payload
