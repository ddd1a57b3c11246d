import json

import pytest

from core import settings


def test_int_settings_fall_back_on_garbage(monkeypatch):
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "three")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "0")
    assert settings.db_pool_min_size() == 1
    assert settings.db_pool_max_size() == 1


def test_cors_origins(monkeypatch):
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    assert "http://localhost:4321" in settings.cors_allow_origins()

    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://dept.example.edu, ,http://localhost:3000")
    assert settings.cors_allow_origins() == ["https://dept.example.edu", "http://localhost:3000"]


def test_packaged_navigation_fallback(monkeypatch):
    monkeypatch.delenv("NAVIGATION_FALLBACK_FILE", raising=False)
    items = settings.load_navigation_fallback()
    assert [item["url"] for item in items] == ["/", "/about", "/teaching", "/faculty", "/news", "/contact"]


def test_navigation_fallback_file_override(monkeypatch, tmp_path):
    path = tmp_path / "nav.json"
    path.write_text(json.dumps([{"id": 1, "label": "Home", "url": "/"}]), encoding="utf-8")
    monkeypatch.setenv("NAVIGATION_FALLBACK_FILE", str(path))
    assert settings.load_navigation_fallback() == [{"id": 1, "label": "Home", "url": "/"}]

    path.write_text(json.dumps({"items": []}), encoding="utf-8")
    with pytest.raises(RuntimeError, match="JSON array"):
        settings.load_navigation_fallback()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
