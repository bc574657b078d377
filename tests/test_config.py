from country_search.config import Settings


def test_cors_origins_default_to_empty(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    assert Settings(_env_file=None).cors_origins == []


def test_cors_origins_accepts_comma_separated_string():
    settings = Settings(_env_file=None, cors_origins="https://a.example, https://b.example")

    assert settings.cors_origins == ["https://a.example", "https://b.example"]
