"""Tests for the calendar meetings HTTP client using httpx.MockTransport."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import pytest

from src.config import settings
from src.meetings.actions import fetch_meetings
from src.meetings.api_client import AUTH_HEADER, MeetingsApiClient, build_url
from src.meetings.store import MeetingsStore

HOST = "https://calendar.example.com"


def _client(handler: Any, token: str | None = "tok-123") -> MeetingsApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return MeetingsApiClient(auth_token=token, http=http, host=HOST, namespace="api/v1/calendar")


class TestBuildUrl:
    def test_joins_parts(self) -> None:
        assert build_url("meetings/", HOST, "api/v1/calendar") == f"{HOST}/api/v1/calendar/meetings/"

    def test_defaults_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "recall_api_host", "http://local")
        monkeypatch.setattr(settings, "recall_calendar_api_namespace", "ns")
        assert build_url("meetings/refresh") == "http://local/ns/meetings/refresh"


class TestMeetingsApiClient:
    def test_list_meetings(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"id": "m1"}])

        result = asyncio.run(_client(handler).list_meetings())

        assert result == [{"id": "m1"}]
        assert seen[0].method == "GET"
        assert str(seen[0].url) == f"{HOST}/api/v1/calendar/meetings/"
        assert seen[0].headers[AUTH_HEADER] == "tok-123"
        assert seen[0].headers["Content-Type"] == "application/json"

    def test_refresh_meetings(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        asyncio.run(_client(handler).refresh_meetings())

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/v1/calendar/meetings/refresh"

    def test_update_meeting_sends_record_override(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": "m1", "override_should_record": False})

        result = asyncio.run(_client(handler).update_meeting("m1", False))

        assert result["id"] == "m1"
        assert seen[0].method == "PUT"
        assert seen[0].url.path == "/api/v1/calendar/meetings/m1/"
        assert json.loads(seen[0].content) == {"override_should_record": False}

    def test_no_token_header_when_token_empty(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        asyncio.run(_client(handler, token="").list_meetings())
        assert AUTH_HEADER not in seen[0].headers

    def test_error_status_returns_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "unauthorized"})

        result = asyncio.run(_client(handler).list_meetings())
        assert result == {"error": "unauthorized"}

    def test_non_json_body_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(ValueError):
            asyncio.run(_client(handler).list_meetings())


class TestClientWithOrchestration:
    def test_unauthorized_payload_yields_empty_list(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "unauthorized"})

        store = MeetingsStore()
        asyncio.run(fetch_meetings(store.dispatch, _client(handler)))

        assert store.state.data == []
        assert store.state.error is None

    def test_transport_error_surfaces_in_state(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        store = MeetingsStore()
        asyncio.run(fetch_meetings(store.dispatch, _client(handler)))

        assert isinstance(store.state.error, httpx.ConnectError)
        assert store.state.data is None
        assert store.state.loading is False
