import pytest

from fund_selector.config import Settings, load_settings


def test_defaults():
    s = load_settings()
    assert s.fund_search_url is None
    assert not s.fund_search_enabled
    assert s.fund_search_country == "IN"
    assert s.session_ttl_days == 14

def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FUND_SEARCH_URL", "https://funds.example.com/search")
    monkeypatch.setenv("FUND_SEARCH_MAX_CANDIDATES", "3")
    monkeypatch.setenv("FUND_SEARCH_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.fund_search_enabled
    assert s.fund_search_max_candidates == 3
    assert s.fund_search_timeout == 2.5
    assert s.log_level == "DEBUG"

def test_bad_number_is_reported(monkeypatch):
    monkeypatch.setenv("FUND_SEARCH_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="FUND_SEARCH_TIMEOUT"):
        load_settings()

def test_settings_are_frozen():
    with pytest.raises(Exception):
        Settings().env = "prod"
