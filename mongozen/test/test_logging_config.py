"""Tests for logging setup and runtime configuration."""

import logging

import pytest

from mongozen.config import MongoZenConfig
from mongozen.utils.logging_utils import configure_split_stream_logging, resolve_log_level


@pytest.mark.parametrize("level,expected", [
    (None, logging.INFO),
    ("debug", logging.DEBUG),
    ("WARN", logging.WARNING),
    (" error ", logging.ERROR),
    ("30", 30),
    (logging.ERROR, logging.ERROR),
    ("verbose", logging.INFO),
])
def test_resolve_log_level(level, expected):
    assert resolve_log_level(level) == expected


def test_resolve_log_level_fallback():
    assert resolve_log_level("unknown", logging.WARNING) == logging.WARNING


@pytest.mark.usefixtures("restore_root_logging")
class TestSplitStreamLogging:

    def test_levels_are_split_between_streams(self, capsys):
        configure_split_stream_logging(level=logging.DEBUG, stderr_level=logging.WARNING,
                                       formatter=logging.Formatter("%(levelname)s %(message)s"))
        logger = logging.getLogger("mongozen.test")

        logger.debug("details")
        logger.info("progress")
        logger.warning("careful")
        logger.error("broken")

        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["DEBUG details", "INFO progress"]
        assert captured.err.splitlines() == ["WARNING careful", "ERROR broken"]

    def test_root_level_filters_records(self, capsys):
        configure_split_stream_logging(level=logging.WARNING)

        logging.getLogger("mongozen.test").info("hidden")

        assert capsys.readouterr().out == ""

    def test_handlers_are_replaced(self):
        configure_split_stream_logging()
        configure_split_stream_logging()

        assert len(logging.getLogger().handlers) == 2


class TestMongoZenConfig:

    def test_defaults(self, monkeypatch):
        for name in ("MONGOZEN_LOG_LEVEL", "MONGOZEN_PRINT_LEVEL", "MONGOZEN_CACHE_ENABLED"):
            monkeypatch.delenv(name, raising=False)

        config = MongoZenConfig.from_env()

        assert config == MongoZenConfig(log_level="INFO", print_level="WARNING", cache_enabled=True)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MONGOZEN_LOG_LEVEL", "debug")
        monkeypatch.setenv("MONGOZEN_PRINT_LEVEL", "error")
        monkeypatch.setenv("MONGOZEN_CACHE_ENABLED", "False")

        config = MongoZenConfig.from_env()

        assert config.log_level == "debug"
        assert config.print_level == "error"
        assert config.cache_enabled is False

    @pytest.mark.usefixtures("restore_root_logging")
    def test_set_logging(self):
        logger = MongoZenConfig(log_level="debug", print_level="error").set_logging()

        assert logger.name == "mongozen"
        assert logging.getLogger().level == logging.DEBUG
