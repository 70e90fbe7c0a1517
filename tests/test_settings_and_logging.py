"""
Tests for application settings and logging configuration.

These tests verify that:
1. Settings defaults can be overridden with APP_ environment variables
2. Template paths resolve per document type
3. JSON and readable formatters carry context and extra data
4. configure_logging wires console and file handlers
"""

import io
import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from config.logging_config import (
    ContextLogger,
    JsonFormatter,
    ReadableFormatter,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
)
from config.settings import Settings, get_settings


@pytest.fixture
def restore_root_logger():
    """Drop the handlers configure_logging adds and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (JsonFormatter, ReadableFormatter)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def capture(formatter, name="tests.capture"):
    """Return a logger writing through formatter into a buffer."""
    buffer = io.StringIO()
    handler = logging.StreamHandler(buffer)
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, buffer


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.need_appearances is True
        assert settings.flatten_forms is True
        assert settings.templates_dir == Path("forms")
        assert settings.environment == "test"

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("APP_LOG_LEVEL", "debug")
        monkeypatch.setenv("APP_TEMPLATES_DIR", str(tmp_path))
        monkeypatch.setenv("APP_NEED_APPEARANCES", "false")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.templates_dir == tmp_path
        assert settings.need_appearances is False

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_is_production(self):
        assert Settings(environment="production").is_production is True
        assert Settings(environment="development").is_production is False

    def test_template_path(self, tmp_path):
        settings = Settings(templates_dir=tmp_path)

        assert settings.template_path("financial-affidavit") == tmp_path / "financial-affidavit.pdf"
        assert settings.template_path("petition-no-children") == tmp_path / "petition-dissolution-no-children.pdf"

    def test_template_path_unknown_type(self):
        assert Settings().template_path("summons") is None

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_basic_record(self):
        logger, buffer = capture(JsonFormatter())

        logger.info("Filled template")

        data = json.loads(buffer.getvalue())
        assert data["level"] == "INFO"
        assert data["logger"] == "tests.capture"
        assert data["message"] == "Filled template"
        assert data["timestamp"].endswith("Z")

    def test_extra_data_and_context(self):
        logger, buffer = capture(JsonFormatter())

        with log_context(session_id="sess-1", document_type="parenting-plan"):
            logger.info("Mapped answers", extra={"extra_data": {"fields": 12}})

        data = json.loads(buffer.getvalue())
        assert data["session_id"] == "sess-1"
        assert data["document_type"] == "parenting-plan"
        assert data["fields"] == 12

    def test_context_is_reset_after_block(self):
        logger, buffer = capture(JsonFormatter())

        with log_context(document_type="parenting-plan"):
            pass
        logger.info("Outside")

        assert "document_type" not in json.loads(buffer.getvalue())

    def test_exception_included(self):
        logger, buffer = capture(JsonFormatter())

        try:
            raise ValueError("bad template")
        except ValueError:
            logger.exception("Fill failed")

        assert "bad template" in json.loads(buffer.getvalue())["exception"]


class TestReadableFormatter:
    """Tests for ReadableFormatter."""

    def test_plain_output(self):
        logger, buffer = capture(ReadableFormatter(use_color=False))

        logger.warning("Skipped field", extra={"extra_data": {"field": "FavoriteColor"}})

        line = buffer.getvalue()
        assert "WARNING" in line
        assert "[tests.capture] Skipped field" in line
        assert "field=FavoriteColor" in line
        assert "\033[" not in line

    def test_colored_output(self):
        logger, buffer = capture(ReadableFormatter(use_color=True))

        logger.error("Broken")

        assert ReadableFormatter.COLORS["ERROR"] in buffer.getvalue()


class TestContextLogger:
    """Tests for get_logger and ContextLogger."""

    def test_bound_extra_merged(self):
        base, buffer = capture(JsonFormatter(), name="tests.context")
        logger = get_logger("tests.context", component="filler")

        logger.info("Hello", extra={"extra_data": {"fields": 3}})

        data = json.loads(buffer.getvalue())
        assert isinstance(logger, ContextLogger)
        assert logger.logger is base
        assert data["component"] == "filler"
        assert data["fields"] == 3

    def test_session_id_added(self):
        _, buffer = capture(JsonFormatter(), name="tests.session")
        logger = get_logger("tests.session")

        with log_context(session_id="sess-9"):
            logger.info("Hello")

        assert json.loads(buffer.getvalue())["session_id"] == "sess-9"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_handler(self, restore_root_logger):
        configure_logging(level="WARNING", json_output=True)

        root = restore_root_logger
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("pypdf").level == logging.ERROR

    def test_readable_by_default(self, restore_root_logger):
        configure_logging()

        assert isinstance(restore_root_logger.handlers[0].formatter, ReadableFormatter)

    def test_log_file_is_json(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "forms.log"

        configure_logging(level="INFO", log_file=log_file)
        logging.getLogger("tests.file").info("Written to file")
        for handler in restore_root_logger.handlers:
            handler.flush()

        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "Written to file"

    def test_configure_from_settings(self, restore_root_logger):
        configure_from_settings(Settings(log_level="error", log_json=True))

        assert restore_root_logger.level == logging.ERROR
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_configure_from_cached_settings(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("APP_LOG_LEVEL", "DEBUG")

        configure_from_settings()

        assert restore_root_logger.level == logging.DEBUG
