from matchday_mcp.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, load_settings


def test_defaults(monkeypatch):
    for name in ("FOOTBALL_API_KEY", "FOOTBALL_API_BASE_URL", "FOOTBALL_API_TIMEOUT", "MATCHDAY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.api_key == ""
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.log_level == "INFO"


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("FOOTBALL_API_TIMEOUT", "soon")
    monkeypatch.setenv("MATCHDAY_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.log_level == "DEBUG"
