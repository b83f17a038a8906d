"""Tests for settings and logging configuration."""

import json
import logging

import pytest
from pydantic import ValidationError

from logins.config import Settings
from logins.logger import JSONFormatter, get_logger, setup_logging


class TestSettings:
    """Settings loaded from the environment."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url.startswith("mysql+aiomysql://")
        assert settings.pagination_strategy == "offset"
        assert settings.page_limit_default == 20
        assert settings.log_format == "dev"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PAGINATION_STRATEGY", "id_range")
        monkeypatch.setenv("PAGE_LIMIT_DEFAULT", "50")
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "2.5")

        settings = Settings(_env_file=None)

        assert settings.pagination_strategy == "id_range"
        assert settings.page_limit_default == 50
        assert settings.request_timeout_seconds == 2.5

    def test_rejects_unknown_strategy(self, monkeypatch):
        monkeypatch.setenv("PAGINATION_STRATEGY", "keyset")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:
    """Logger helpers."""

    def test_logger_namespace(self):
        assert get_logger("api").name == "logins.api"

    def test_setup_structured_logging(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug", "structured")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_json_formatter(self):
        record = logging.LogRecord(
            name="logins.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg='login "alice" banned',
            args=(),
            exc_info=None,
        )

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "logins.test"
        assert entry["message"] == 'login "alice" banned'
