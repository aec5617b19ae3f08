"""
Tests for logging setup.
"""
import logging

import pytest

from stockcast.shared.log import setup_logging, PACKAGE_LOGGER


@pytest.fixture
def restore_package_logger():
    """Restore the package logger after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_console_only(restore_package_logger):
    logger = setup_logging()
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_verbose_sets_debug(restore_package_logger):
    assert setup_logging(verbose=True).level == logging.DEBUG


def test_root_handlers_untouched(restore_package_logger):
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        setup_logging()
        assert sentinel in root.handlers
    finally:
        root.removeHandler(sentinel)


def test_repeated_setup_replaces_handlers(tmp_path, restore_package_logger):
    setup_logging(log_path=tmp_path / "a.log")
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_propagate_option(restore_package_logger):
    assert setup_logging(propagate=True).propagate is True


def test_file_handler_writes(tmp_path, restore_package_logger):
    log_path = tmp_path / "logs" / "run.log"
    logger = setup_logging(log_path=log_path)
    assert len(logger.handlers) == 2

    logging.getLogger("stockcast.data.ingestion").info("hello file")
    for handler in logger.handlers:
        handler.flush()

    content = log_path.read_text()
    assert "stockcast.data.ingestion - INFO - hello file" in content
