"""Tests for Settings loading."""

from __future__ import annotations

import pytest

from src.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("RECALL_API_HOST", "RECALL_CALENDAR_API_NAMESPACE", "REQUEST_TIMEOUT", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        cfg = Settings(_env_file=None)  # type: ignore[call-arg]
        assert cfg.recall_api_host == "https://recall-one-sigma.vercel.app"
        assert cfg.recall_calendar_api_namespace == "api/v1/calendar"
        assert cfg.request_timeout == 30.0
        assert cfg.log_level == "INFO"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECALL_API_HOST", "http://localhost:3003")
        monkeypatch.setenv("RECALL_CALENDAR_AUTH_TOKEN", "secret")
        monkeypatch.setenv("REQUEST_TIMEOUT", "5")
        cfg = Settings(_env_file=None)  # type: ignore[call-arg]
        assert cfg.recall_api_host == "http://localhost:3003"
        assert cfg.recall_calendar_auth_token == "secret"
        assert cfg.request_timeout == 5.0

    def test_invalid_number_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQUEST_TIMEOUT", "soon")
        with pytest.raises(ValueError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
