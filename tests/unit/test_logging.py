import logging

import pytest

from gofritai.core.logging import DEFAULT_LOG_LEVEL, configure_root_logging, normalize_log_level


@pytest.mark.unit
class TestNormalizeLogLevel:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("debug", "DEBUG"),
            ("INFO", "INFO"),
            ("ERROR  # only errors", "ERROR"),
            ("LOUD", DEFAULT_LOG_LEVEL),
            ("", DEFAULT_LOG_LEVEL),
            (None, DEFAULT_LOG_LEVEL),
        ],
    )
    def test_normalizes(self, raw, expected):
        assert normalize_log_level(raw) == expected


@pytest.mark.unit
class TestConfigureRootLogging:
    def test_applies_level(self):
        assert configure_root_logging("INFO") == "INFO"
        assert logging.getLogger().level == logging.INFO

    def test_verbose_forces_debug(self):
        assert configure_root_logging("ERROR", verbose=True) == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_replaces_existing_handlers(self):
        configure_root_logging("INFO")
        configure_root_logging("INFO")

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_invalid_level_falls_back(self):
        assert configure_root_logging("LOUD") == DEFAULT_LOG_LEVEL
