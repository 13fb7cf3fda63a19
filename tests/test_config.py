from __future__ import annotations

from app.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "MONGO_URI", "MONGODB_URL", "SMTP_HOST", "SMTP_PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 5000
    assert settings.smtp_host == "smtp.gmail.com"
    assert settings.smtp_port == 465
    assert settings.smtp_use_tls is True
    assert settings.mongo_server_selection_timeout_ms == 5000
    assert settings.effective_mongo_uri is None
    assert settings.escape_email_html is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost/contacts")
    monkeypatch.delenv("MONGODB_URL", raising=False)
    monkeypatch.setenv("EMAIL_USER", "inbox@example.com")
    monkeypatch.setenv("EMAIL_PASS", "app-password")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.effective_mongo_uri == "mongodb://localhost/contacts"
    assert settings.email_user == "inbox@example.com"
    assert settings.email_pass == "app-password"


def test_mongodb_url_overrides_mongo_uri(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://first")
    monkeypatch.setenv("MONGODB_URL", "mongodb://second")
    assert Settings(_env_file=None).effective_mongo_uri == "mongodb://second"
