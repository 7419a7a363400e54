"""
Unit tests for the logging setup.
"""

import json
import logging

import pytest

from market_models.data.models import Playlist
from market_models.infrastructure.error_handling import PayloadValidationError
from market_models.infrastructure.monitoring import (
    ContextLogger,
    JsonLineFormatter,
    LogCategory,
    get_export_logger,
    get_logger,
    get_schema_logger,
    setup_logging,
)
from market_models.infrastructure.monitoring.logger import ERROR_LOG_FILE_NAME, LOG_FILE_NAME


class TestSetupLogging:
    """Test setup_logging configuration."""

    def test_unknown_level(self, restore_logging):
        with pytest.raises(ValueError):
            setup_logging(log_level="LOUD", enable_file=False)

    def test_package_logger_silent_by_default(self):
        handlers = logging.getLogger("market_models").handlers

        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
        assert logging.getLogger("market_models").propagate

    def test_console_only(self, restore_logging, tmp_path):
        setup_logging(log_level="WARNING", log_dir=str(tmp_path / "logs"), enable_file=False)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert not (tmp_path / "logs").exists()

    def test_file_logging(self, restore_logging, tmp_path):
        setup_logging(log_level="INFO", log_dir=str(tmp_path), enable_console=False, enable_file=True)

        logging.getLogger("market_models.test").debug("debug line")
        logging.getLogger("market_models.test").error("error line")

        main_log = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
        error_log = (tmp_path / ERROR_LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "debug line" in main_log
        assert "error line" in main_log
        assert "debug line" not in error_log
        assert "error line" in error_log

    def test_rejected_payload_is_logged(self, restore_logging, tmp_path, playlist_payload):
        setup_logging(log_level="INFO", log_dir=str(tmp_path), enable_console=False, enable_file=True)
        del playlist_payload["name"]

        with pytest.raises(PayloadValidationError):
            Playlist.from_dict(playlist_payload)

        main_log = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "Payload rejected" in main_log
        assert "market_models.schema.Playlist" in main_log

    def test_json_file_logging(self, restore_logging, tmp_path):
        setup_logging(
            log_level="INFO", log_dir=str(tmp_path),
            enable_console=False, enable_file=True, enable_json=True
        )

        logging.getLogger("market_models.test").info("json line")

        lines = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["message"] == "json line"
        assert entry["level"] == "INFO"


class TestJsonLineFormatter:
    """Test JSON log lines."""

    def test_extras_included(self):
        record = logging.LogRecord("market_models", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        record.model = "Ticker"

        entry = json.loads(JsonLineFormatter().format(record))

        assert entry["message"] == "hello world"
        assert entry["model"] == "Ticker"
        assert "args" not in entry
        assert "msg" not in entry


class TestContextLogger:
    """Test context handling of the logger wrappers."""

    def test_add_and_clear_context(self):
        logger = ContextLogger("market_models.test")
        logger.add_context(request_id="r1").add_context(user="u1")

        assert logger.context == {"request_id": "r1", "user": "u1"}

        logger.clear_context()
        assert logger.context == {}

    def test_schema_logger_context(self):
        logger = get_schema_logger("OptionContract")

        assert logger.name == "market_models.schema.OptionContract"
        assert logger.context == {"category": LogCategory.SCHEMA.value, "model": "OptionContract"}

    def test_export_logger_context(self):
        assert get_export_logger().context == {"category": "export"}
        assert get_export_logger().name == "market_models.export"

    def test_get_logger_with_category(self):
        logger = get_logger("market_models.validators", LogCategory.VALIDATION)

        assert logger.context == {"category": "validation"}
        assert get_logger("plain").context == {}
