import pytest
from app.config import Settings


def test_cors_origins_comma_separated():
    settings = Settings(_env_file=None, cors_origins="http://a.example, http://b.example,")
    assert settings.cors_origin_list == ["http://a.example", "http://b.example"]


@pytest.mark.parametrize("value, expected", [
    ("*", ["*"]),
    ("http://localhost:3000", ["http://localhost:3000"]),
    ("http://a.example,http://b.example", ["http://a.example", "http://b.example"]),
])
def test_cors_origins_from_environment(monkeypatch, value, expected):
    """Test that plain (non-JSON) CORS_ORIGINS values load."""
    monkeypatch.setenv("CORS_ORIGINS", value)
    assert Settings(_env_file=None).cors_origin_list == expected


def test_defaults(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("STATS_WINDOW_DAYS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.cors_origin_list == ["*"]
    assert settings.stats_window_days == 7
