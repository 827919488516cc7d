"""Tests for logging configuration."""

import inspect
import logging

from api_scanner.core.logging import add_service, configure_logging


def scanner_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_api_scanner", False)]


class TestConfigureLogging:
    """Tests for handler setup."""

    def test_reconfigure_keeps_single_handler(self):
        """Repeated configuration should replace, not stack, the handler."""
        configure_logging(level="INFO")
        configure_logging(level="DEBUG")

        handlers = scanner_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        configure_logging(level="chatty")

        assert logging.getLogger().level == logging.WARNING

    def test_only_stderr_options(self):
        """Logging goes to stderr; there is no file output option."""
        params = inspect.signature(configure_logging).parameters
        assert list(params) == ["level", "json_format"]

    def test_add_service(self):
        assert add_service(None, "info", {})["service"] == "api-scanner"
        assert add_service(None, "info", {"service": "x"})["service"] == "x"
