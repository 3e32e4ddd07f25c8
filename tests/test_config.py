"""Tests for configuration helpers."""

from streammon_dashboard.config import Settings, parse_server_ids


def test_parse_server_ids() -> None:
    assert parse_server_ids(None) is None
    assert parse_server_ids("") is None
    assert parse_server_ids("*") is None
    assert parse_server_ids("3, 1,,abc,3") == [3, 1]
    assert parse_server_ids("abc") is None


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("STREAMMON_URL", "https://media.example")
    monkeypatch.setenv("DISPLAY_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("ALL_TIME_WINDOW_DAYS", "120")

    settings = Settings()

    assert settings.streammon_url == "https://media.example"
    assert settings.display_timezone == "Europe/Berlin"
    assert settings.all_time_window_days == 120
    assert settings.streammon_api_key is None
