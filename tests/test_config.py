from app.config import Settings


def test_defaults(monkeypatch):
    for var in ("DATABASE_URL", "OPENAI_MODEL", "OPENAI_BASE_URL", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = Settings()
    assert s.database_url == "tickets.db"
    assert s.openai_model == "gpt-3.5-turbo"
    assert s.openai_base_url == "https://api.openai.com/v1"
    assert s.port == 3000
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("OPENAI_API_KEY", " sk-abc ")
    monkeypatch.setenv("OPENAI_BASE_URL", "http://proxy.local/v1/")
    s = Settings()
    assert s.port == 8080
    assert s.openai_api_key == "sk-abc"
    assert s.openai_base_url == "http://proxy.local/v1"
