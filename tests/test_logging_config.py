"""
Tests for logging_config module.
"""

import logging

import pytest

from zeta.infra.logging_config import LOGGER_NAME, DailyRotatingFileHandler, setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    """Drop handlers added by setup_logging and restore propagation."""
    logger = logging.getLogger(LOGGER_NAME)
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestDailyRotatingFileHandler:
    """Tests for DailyRotatingFileHandler class."""

    def test_handler_creates_log_directory(self, tmp_path):
        """Test that handler creates log directory if it doesn't exist."""
        log_dir = tmp_path / "new_logs"
        assert not log_dir.exists()

        handler = DailyRotatingFileHandler(log_dir=str(log_dir))
        assert log_dir.exists()
        handler.close()

    def test_handler_creates_log_file(self, tmp_path):
        """Test that handler creates a log file with correct naming."""
        handler = DailyRotatingFileHandler(log_dir=str(tmp_path))

        log_files = list(tmp_path.glob("zeta_*.log"))
        assert len(log_files) == 1
        assert log_files[0].name.startswith("zeta_")
        handler.close()

    def test_handler_emits_record(self, tmp_path):
        """Test that handler writes log records to file."""
        handler = DailyRotatingFileHandler(log_dir=str(tmp_path))
        handler.setFormatter(logging.Formatter('%(message)s'))

        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg="Story ready",
            args=(),
            exc_info=None
        )
        handler.emit(record)
        handler.close()

        content = list(tmp_path.glob("zeta_*.log"))[0].read_text()
        assert "Story ready" in content


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_returns_logger(self):
        logger = setup_logging("INFO", log_dir=None)

        assert isinstance(logger, logging.Logger)
        assert logger.name == "zeta"

    def test_sets_correct_log_level(self):
        logger = setup_logging("DEBUG", log_dir=None)
        assert logger.level == logging.DEBUG

        logger = setup_logging("WARNING", log_dir=None)
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("LOUD", log_dir=None).level == logging.INFO

    def test_console_only_without_log_dir(self):
        logger = setup_logging("INFO", log_dir=None)

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], logging.FileHandler)

    def test_file_handler_with_log_dir(self, tmp_path):
        logger = setup_logging("INFO", log_dir=str(tmp_path))

        assert any(isinstance(h, DailyRotatingFileHandler) for h in logger.handlers)
        assert list(tmp_path.glob("zeta_*.log"))

    def test_repeat_call_replaces_handlers(self):
        setup_logging("INFO", log_dir=None)
        logger = setup_logging("DEBUG", log_dir=None)

        assert len(logger.handlers) == 1

    def test_prevents_propagation(self):
        assert setup_logging("INFO", log_dir=None).propagate is False
