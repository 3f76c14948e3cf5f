"""Tests for logging setup driven by the resolved config."""

import pytest
import structlog
from shared.utils.logging import configure_logging, get_log_level


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_logging(directory="", env="test")


def _renderer():
    return structlog.get_config()["processors"][-1]


class TestRenderer:
    @pytest.mark.parametrize("env", ["production", "staging"])
    def test_json_in_deployed_environments(self, env, monkeypatch):
        monkeypatch.setenv("SHOPFRONT_ENV", "test")
        configure_logging(directory="", env=env)
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_console_elsewhere(self, monkeypatch):
        monkeypatch.setenv("SHOPFRONT_ENV", "production")
        configure_logging(directory="", env="development")
        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


class TestLogLevel:
    def test_env_argument_wins_over_process_environment(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("SHOPFRONT_ENV", "development")
        assert get_log_level(env="test") == "WARNING"

    def test_explicit_level(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert get_log_level("ERROR", env="production") == "ERROR"
