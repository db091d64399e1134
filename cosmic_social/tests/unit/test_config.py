# cosmic_social/tests/unit/test_config.py
import pytest
from pydantic import ValidationError

from cosmic_social.config import AppConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    config = AppConfig(API_BASE_URL="http://social.test")

    assert config.PROJECT_NAME == "Cosmic Social"
    assert config.API_TIMEOUT_SECONDS == 10.0
    assert config.LOG_LEVEL == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://env.test")
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "2.5")

    config = AppConfig()

    assert config.API_BASE_URL == "http://env.test"
    assert config.API_TIMEOUT_SECONDS == 2.5


def test_base_url_is_required(monkeypatch):
    monkeypatch.delenv("API_BASE_URL", raising=False)
    with pytest.raises(ValidationError):
        AppConfig(_env_file=None)
