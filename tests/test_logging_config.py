"""
Tests for logging configuration.
"""

import logging
import logging.handlers

import pytest

from logging_config import (
    ColoredFormatter,
    configure_module_logger,
    get_logger,
    setup_logging,
    setup_store_logging,
)


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level after setup_logging replaces them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Test setup_logging handler wiring."""

    def test_console_only(self, restore_root_logger, tmp_path):
        """Console-only setup installs one stream handler and no files."""
        setup_logging(level="WARNING", log_dir=str(tmp_path / "logs"),
                      enable_console=True, enable_file=False)

        root = restore_root_logger
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ColoredFormatter)
        assert not (tmp_path / "logs").exists()

    def test_file_handlers(self, restore_root_logger, tmp_path):
        """File setup creates main, debug and error rotating logs."""
        log_dir = tmp_path / "logs"
        setup_logging(level="DEBUG", log_dir=str(log_dir),
                      enable_console=False, enable_file=True, format_style="simple")

        root = restore_root_logger
        rotating = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert sorted(h.level for h in rotating) == [logging.DEBUG, logging.INFO, logging.ERROR]

        get_logger("scoreboard.test").error("boom")
        for handler in rotating:
            handler.flush()

        assert (log_dir / "live_scoreboard.log").exists()
        assert "boom" in (log_dir / "live_scoreboard_error.log").read_text(encoding="utf-8")

    def test_repeat_setup_replaces_handlers(self, restore_root_logger, tmp_path):
        """A second call swaps out the first call's handlers and level."""
        setup_logging(level="INFO", log_dir=str(tmp_path), enable_console=True, enable_file=False)
        first = list(restore_root_logger.handlers)

        setup_logging(level="ERROR", log_dir=str(tmp_path), enable_console=True, enable_file=False)

        root = restore_root_logger
        assert len(root.handlers) == 1
        assert root.handlers[0] not in first
        assert root.level == logging.ERROR


class TestColoredFormatter:
    """Test console colouring."""

    def test_levelname_colored_and_restored(self):
        """Colour codes appear in output but the record is left untouched."""
        formatter = ColoredFormatter("%(levelname)s - %(message)s")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

        output = formatter.format(record)

        assert output.startswith(ColoredFormatter.COLORS['WARNING'])
        assert "careful" in output
        assert record.levelname == "WARNING"


class TestModuleLoggers:
    """Test module-level logger configuration."""

    def test_get_logger(self):
        """get_logger returns the named logger."""
        assert get_logger("scoreboard.scoreboard") is logging.getLogger("scoreboard.scoreboard")

    def test_configure_module_logger(self):
        """Level and propagation are applied."""
        logger = configure_module_logger("scoreboard.test_module", level="ERROR", propagate=False)
        try:
            assert logger.level == logging.ERROR
            assert logger.propagate is False
        finally:
            logger.setLevel(logging.NOTSET)
            logger.propagate = True

    def test_setup_store_logging(self):
        """Store loggers inherit the configured level."""
        setup_store_logging(level="ERROR")
        try:
            assert logging.getLogger("Store.matches").getEffectiveLevel() == logging.ERROR
        finally:
            logging.getLogger("Store").setLevel(logging.NOTSET)
