"""HTTP client wrapper for the Meeting Assistant FastAPI backend."""

from __future__ import annotations

import os

import httpx
import streamlit as st

API_URL = os.getenv("API_URL", "http://localhost:8000")


def check_health() -> bool:
    """Return True if the API server responds to /health."""
    try:
        r = httpx.get(f"{API_URL}/health", timeout=5.0)
        return r.status_code == 200
    except httpx.ConnectError:
        return False


def track_completions(meeting_id: str) -> dict:  # type: ignore[type-arg]
    """Close the meeting's pending action items its transcript resolves."""
    try:
        r = httpx.post(
            f"{API_URL}/api/meetings/{meeting_id}/action-items/completions",
            timeout=60.0,
        )
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Completion tracking failed: {e}")
        return {}
