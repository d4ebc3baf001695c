"""Async HTTP client for the calendar meetings service."""

from __future__ import annotations

from typing import Any

import httpx

from src.config import settings

AUTH_HEADER = "X-RecallCalendarAuthToken"


def build_url(
    path: str,
    host: str | None = None,
    namespace: str | None = None,
) -> str:
    """Join host, API namespace and path, e.g. ``{host}/api/v1/calendar/meetings/``."""
    host = host if host is not None else settings.recall_api_host
    namespace = namespace if namespace is not None else settings.recall_calendar_api_namespace
    return f"{host}/{namespace}/{path}"


class MeetingsApiClient:
    """Calendar meetings endpoints.

    Response bodies are decoded and returned whatever the status code; callers
    decide whether the payload is usable. Transport failures and non-JSON
    bodies raise.
    """

    def __init__(
        self,
        auth_token: str | None = None,
        http: httpx.AsyncClient | None = None,
        host: str | None = None,
        namespace: str | None = None,
    ) -> None:
        self.auth_token = auth_token if auth_token is not None else settings.recall_calendar_auth_token
        self.host = host
        self.namespace = namespace
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=settings.request_timeout)

    async def make_request(
        self,
        method: str,
        path: str,
        data: dict[str, Any] | None = None,
    ) -> Any:
        headers = {"Content-Type": "application/json"}
        if self.auth_token:
            headers[AUTH_HEADER] = self.auth_token

        r = await self._http.request(
            method,
            build_url(path, self.host, self.namespace),
            headers=headers,
            json=data,
        )
        return r.json()

    async def list_meetings(self) -> Any:
        return await self.make_request("GET", "meetings/")

    async def refresh_meetings(self) -> Any:
        return await self.make_request("POST", "meetings/refresh")

    async def update_meeting(self, meeting_id: str, override_should_record: bool) -> Any:
        return await self.make_request(
            "PUT",
            f"meetings/{meeting_id}/",
            data={"override_should_record": override_should_record},
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> MeetingsApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
