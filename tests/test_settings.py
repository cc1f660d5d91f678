"""Tests for settings parsing."""

from pydantic import ValidationError
import pytest

from antiquebooks.settings import Settings


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


def test_defaults():
    s = _settings()
    assert s.supported_locales == ["en", "sk", "de"]
    assert s.default_locale == "en"
    assert s.cart_backend == "redis"
    assert s.cart_currency == "EUR"


def test_locales_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("SUPPORTED_LOCALES", "EN, sk ,cs")
    assert _settings().supported_locales == ["en", "sk", "cs"]


def test_locales_from_json_env(monkeypatch):
    monkeypatch.setenv("SUPPORTED_LOCALES", '["en","de"]')
    assert _settings().supported_locales == ["en", "de"]


def test_cors_origins_alias(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example,https://b.example")
    assert _settings().cors_origins == ["https://a.example", "https://b.example"]


def test_currency_is_upper_cased():
    assert _settings(cart_currency="czk").cart_currency == "CZK"


def test_default_locale_must_be_supported():
    with pytest.raises(ValidationError):
        _settings(supported_locales="sk,de", default_locale="en")


def test_unknown_cart_backend_rejected():
    with pytest.raises(ValidationError):
        _settings(cart_backend="postgres")
