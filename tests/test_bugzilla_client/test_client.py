"""Tests for Bugzilla client."""

import os
from typing import Any
from unittest.mock import patch

import httpx
import pytest

from bz_triage.bugzilla_client.client import BugzillaAPIError, BugzillaClient
from bz_triage.bugzilla_client.models import BugQuery


def make_client(handler: Any) -> BugzillaClient:
    return BugzillaClient(
        api_key="test_key",
        base_url="https://bugzilla.example.com/",
        transport=httpx.MockTransport(handler),
    )


class TestBugzillaClientInit:
    """Test BugzillaClient construction."""

    @patch.dict(os.environ, {"BUGZILLA_API_KEY": "env_key"})
    def test_init_with_env_key(self) -> None:
        """Test initialization with environment API key."""
        client = BugzillaClient()
        assert client.api_key == "env_key"
        assert client.headers["X-BUGZILLA-API-KEY"] == "env_key"

    @patch.dict(os.environ, {"BUGZILLA_API_KEY": "env_key"})
    def test_init_with_explicit_key(self) -> None:
        """Test explicit key wins over the environment."""
        client = BugzillaClient(api_key="explicit_key")
        assert client.api_key == "explicit_key"

    @patch.dict(os.environ, {}, clear=True)
    def test_init_without_key(self) -> None:
        """Test initialization without key raises error naming the variable."""
        with pytest.raises(ValueError, match="BUGZILLA_API_KEY") as exc_info:
            BugzillaClient()
        assert "https://bugzilla.redhat.com/userprefs.cgi?tab=apikey" in str(
            exc_info.value
        )

    def test_search_url(self) -> None:
        """Test trailing slashes are stripped from the base URL."""
        client = BugzillaClient(api_key="k", base_url="https://bz.example.com/")
        assert client.search_url == "https://bz.example.com/rest/bug"


class TestBugzillaClientSearch:
    """Test BugzillaClient.search."""

    def test_search_success(self) -> None:
        """Test bugs are parsed in response order and the request is built."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "bugs": [
                        {
                            "id": 2,
                            "assigned_to": "bob",
                            "severity": "high",
                            "status": "NEW",
                            "flags": [{"name": "needinfo", "requestee": "qe"}],
                        },
                        {"id": 1, "assigned_to": "alice", "severity": "low"},
                    ],
                    "faults": [],
                },
            )

        client = make_client(handler)
        bugs = client.search(
            BugQuery(
                product=["P"],
                status=["NEW", "POST"],
                include_fields=["id", "flags"],
            )
        )

        assert [bug.id for bug in bugs] == [2, 1]
        assert bugs[0].flags[0].requestee == "qe"

        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/rest/bug"
        assert request.headers["X-BUGZILLA-API-KEY"] == "test_key"
        assert request.url.params.get_list("bug_status") == ["NEW", "POST"]
        assert request.url.params["include_fields"] == "id,flags"

    def test_search_no_bugs(self) -> None:
        """Test an empty result is not an error."""
        client = make_client(lambda request: httpx.Response(200, json={"bugs": []}))
        assert client.search(BugQuery()) == []

    def test_search_bugzilla_error_payload(self) -> None:
        """Test Bugzilla error payloads raise BugzillaAPIError."""
        client = make_client(
            lambda request: httpx.Response(
                401,
                json={
                    "error": True,
                    "code": 306,
                    "message": "The API key you specified is invalid.",
                },
            )
        )
        with pytest.raises(BugzillaAPIError, match="API key you specified") as exc:
            client.search(BugQuery())
        assert exc.value.status_code == 401
        assert "306" in str(exc.value)

    def test_search_http_error_without_json(self) -> None:
        """Test non-JSON error responses raise BugzillaAPIError."""
        client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))
        with pytest.raises(BugzillaAPIError, match="HTTP 502") as exc:
            client.search(BugQuery())
        assert exc.value.status_code == 502

    def test_search_transport_error(self) -> None:
        """Test connection failures raise BugzillaAPIError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(BugzillaAPIError, match="connection refused") as exc:
            client.search(BugQuery())
        assert exc.value.status_code is None

    def test_search_malformed_payload(self) -> None:
        """Test bug entries that fail validation raise BugzillaAPIError."""
        client = make_client(
            lambda request: httpx.Response(200, json={"bugs": [{"id": "abc"}]})
        )
        with pytest.raises(BugzillaAPIError, match="Could not parse bug data"):
            client.search(BugQuery())

    def test_search_bugs_not_a_list(self) -> None:
        """Test a non-list bugs value raises BugzillaAPIError."""
        client = make_client(lambda request: httpx.Response(200, json={"bugs": {}}))
        with pytest.raises(BugzillaAPIError, match="not a list"):
            client.search(BugQuery())

    def test_search_non_object_body(self) -> None:
        """Test a JSON body that is not an object raises BugzillaAPIError."""
        client = make_client(lambda request: httpx.Response(200, json=[1, 2]))
        with pytest.raises(BugzillaAPIError, match="not a JSON object"):
            client.search(BugQuery())
