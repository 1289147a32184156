"""
tests.test_settings

Settings resolution tests.
"""

from __future__ import annotations

from event_catalog.settings import Settings


def test_timestamp_defaults_follow_source() -> None:
    assert Settings(event_source="static").timestamp_enabled is True
    assert Settings(event_source="model").timestamp_enabled is False


def test_explicit_timestamp_wins() -> None:
    assert Settings(event_source="model", include_timestamp=True).timestamp_enabled is True


def test_env_prefix(monkeypatch) -> None:
    monkeypatch.setenv("EVENTS_EVENT_SOURCE", "model")
    monkeypatch.setenv("EVENTS_API_PORT", "9090")
    s = Settings()
    assert s.event_source == "model"
    assert s.api_port == 9090
