"""Tests for logging setup and log sanitizers"""
import io
import logging

import pytest

from medshop.logging import (
    configure_logging,
    get_logger,
    sanitize_id_for_logging,
    sanitize_string_for_logging,
)


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after the test"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSanitizers:

    def test_id_truncated_to_eight(self):
        assert sanitize_id_for_logging("cart-0123456789abcdef") == "cart-012"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_values(self, value):
        assert sanitize_id_for_logging(value) == "N/A"
        assert sanitize_string_for_logging(value) == "N/A"

    def test_newlines_cannot_forge_lines(self):
        cleaned = sanitize_string_for_logging("Gloves\nERROR - fake entry\r\t")
        assert "\n" not in cleaned
        assert cleaned == "Gloves\\nERROR - fake entry\\r\\t"

    def test_other_control_characters_escaped(self):
        assert sanitize_string_for_logging("a\x1b[31mb\x00") == "a\\x1b[31mb"

    def test_long_text_gets_ellipsis(self):
        assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."


class TestConfigureLogging:

    def test_existing_handlers_left_alone(self, root_logger):
        root_logger.addHandler(logging.NullHandler())
        assert configure_logging() is None

    def test_force_installs_stream_handler(self, root_logger):
        stream = io.StringIO()

        handler = configure_logging(level=logging.DEBUG, stream=stream, force=True)
        get_logger("medshop.tests").debug("slot saved")

        assert root_logger.handlers == [handler]
        assert "[medshop.tests] slot saved" in stream.getvalue()

    def test_client_libraries_quieted(self, root_logger):
        configure_logging(level=logging.DEBUG, stream=io.StringIO(), force=True)

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("postgrest").level == logging.WARNING

    def test_level_from_environment(self, root_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        configure_logging(stream=io.StringIO(), force=True)
        assert root_logger.level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self, root_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        configure_logging(stream=io.StringIO(), force=True)
        assert root_logger.level == logging.INFO


def test_get_logger_is_cached():
    assert get_logger("medshop.cart") is get_logger("medshop.cart")
