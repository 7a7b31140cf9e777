"""Tests for error_handler.logger."""

import io
import json
import logging

import pytest

from error_handler.logger import DefaultLogger, Logger, StructuredLogger, create_logger, get_logger


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        """Test the interface cannot be instantiated."""
        with pytest.raises(TypeError):
            Logger()  # type: ignore


class TestDefaultLogger:
    """Tests for DefaultLogger."""

    def test_writes_level_name_and_message(self):
        """Test level, name, message and context appear on the line."""
        output = io.StringIO()
        logger = DefaultLogger(name="orders-api", output=output, include_timestamp=False)

        logger.warning("User 7 was not found", status=404)

        line = output.getvalue().strip()
        assert line.startswith("[WARNING] [orders-api]")
        assert "User 7 was not found" in line
        assert line.endswith("(status=404)")

    def test_session_id_in_output(self):
        """Test the short session ID is written."""
        output = io.StringIO()
        logger = DefaultLogger(output=output)

        logger.info("hello")

        assert f"session:{logger.get_session_id()[:8]}" in output.getvalue()

    def test_all_levels(self):
        """Test every level method writes its level name."""
        output = io.StringIO()
        logger = DefaultLogger(output=output)

        logger.debug("d")
        logger.info("i")
        logger.warning("w")
        logger.error("e")
        logger.critical("c")

        text = output.getvalue()
        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            assert f"[{level}]" in text


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_json_output(self, capsys):
        """Test JSON output carries level, logger, message and context."""
        logger = StructuredLogger(name="test-json-output", json_format=True)

        logger.error("Internal Server Error", status=500, exception="RuntimeError")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["level"] == "ERROR"
        assert entry["logger"] == "test-json-output"
        assert entry["message"] == "Internal Server Error"
        assert entry["status"] == 500
        assert entry["exception"] == "RuntimeError"
        assert entry["session_id"] == logger.get_session_id()

    def test_text_output_appends_context(self, capsys):
        """Test text output appends context as key=value pairs."""
        logger = StructuredLogger(name="test-text-output")

        logger.warning("Validation error", sub_errors=2)

        out = capsys.readouterr().out
        assert "[WARNING]" in out
        assert "Validation error" in out
        assert "sub_errors=2" in out

    def test_reserved_keys_are_prefixed(self, capsys):
        """Test context keys clashing with LogRecord attributes get a leading underscore."""
        logger = StructuredLogger(name="test-reserved", json_format=True)

        logger.info("collision", name="shadowed", module="x")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["_name"] == "shadowed"
        assert entry["_module"] == "x"
        assert entry["logger"] == "test-reserved"

    def test_level_filters(self, capsys):
        """Test entries below the configured level are dropped."""
        logger = StructuredLogger(name="test-level", level=logging.WARNING)

        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_recreating_does_not_duplicate_handlers(self):
        """Test a second logger with the same name replaces the handlers."""
        StructuredLogger(name="test-dup")
        StructuredLogger(name="test-dup")

        assert len(logging.getLogger("test-dup").handlers) == 1

    def test_recreating_closes_replaced_file_handler(self, tmp_path):
        """Test the log file of a replaced logger is closed."""
        StructuredLogger(name="test-close", log_file=str(tmp_path / "first.log"))
        old_handlers = list(logging.getLogger("test-close").handlers)
        file_handler = next(h for h in old_handlers if isinstance(h, logging.FileHandler))

        StructuredLogger(name="test-close")

        assert file_handler.stream is None
        assert file_handler not in logging.getLogger("test-close").handlers

    def test_log_file(self, tmp_path):
        """Test entries are copied to the log file."""
        log_file = tmp_path / "errors.log"
        logger = StructuredLogger(name="test-file", log_file=str(log_file), json_format=True)

        logger.error("written")

        for handler in logging.getLogger("test-file").handlers:
            handler.flush()
        assert "written" in log_file.read_text()


class TestFactories:
    """Tests for create_logger() and get_logger()."""

    def test_create_logger_reads_env(self, monkeypatch: pytest.MonkeyPatch):
        """Test the level comes from the prefixed environment variable."""
        monkeypatch.setenv("ORDERS_API_LOG_LEVEL", "DEBUG")

        logger = create_logger("orders-api")

        assert isinstance(logger, StructuredLogger)
        assert logging.getLogger("orders-api").level == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch):
        """Test an explicit level overrides the environment."""
        monkeypatch.setenv("ORDERS_API_LOG_LEVEL", "DEBUG")

        create_logger("orders-api", level=logging.ERROR)

        assert logging.getLogger("orders-api").level == logging.ERROR

    def test_get_logger_default_name(self):
        """Test get_logger() uses the package logger name."""
        logger = get_logger()

        assert isinstance(logger, StructuredLogger)
        assert logger.name == "error-handler"
