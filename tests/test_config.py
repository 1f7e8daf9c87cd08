import pytest

import config
from config import Settings


def test_get_list_splits_and_strips(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", " https://a.example , ,https://b.example")
    assert config._get_list("ALLOWED_ORIGINS") == ["https://a.example", "https://b.example"]


def test_default_origins_include_frontend_url(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    monkeypatch.setenv("FRONTEND_URL", "https://menu.example")

    assert config._default_origins() == [
        "https://menu.example",
        "http://localhost:3000",
        "http://localhost:5173",
    ]


def test_allowed_origins_override(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://admin.example")
    assert config._default_origins() == ["https://admin.example"]


def test_get_int(monkeypatch):
    monkeypatch.setenv("MAX_NOTIFICATIONS", "50")
    assert config._get_int("MAX_NOTIFICATIONS", 100) == 50
    monkeypatch.delenv("MAX_NOTIFICATIONS")
    assert config._get_int("MAX_NOTIFICATIONS", 100) == 100


def test_get_int_rejects_garbage(monkeypatch):
    monkeypatch.setenv("PORT", "http")
    with pytest.raises(RuntimeError):
        config._get_int("PORT", 3001)


def test_is_development():
    assert Settings(environment="development").is_development
    assert not Settings(environment="production").is_development
