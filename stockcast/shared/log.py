"""
Logging setup for applications embedding the analysis pipeline.

The library itself only creates module loggers under the 'stockcast'
namespace; call setup_logging() from the application entry point to route
them somewhere. Handlers of other loggers (including root) are left alone.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "stockcast"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    log_path: Optional[Union[str, Path]] = None,
    verbose: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """
    Route the package's log records to stdout and optionally to a file.

    Calling it again replaces the handlers it installed before.

    Args:
        log_path: Path to log file (None = stdout only)
        verbose: If True, use DEBUG level, otherwise INFO
        propagate: Also pass records on to the application's root handlers

    Returns:
        The configured 'stockcast' logger
    """
    level = logging.DEBUG if verbose else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = propagate

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_path:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    return package_logger
