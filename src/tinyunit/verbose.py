"""Logging for the ``tinyunit`` logger namespace.

Library code only ever logs to ``tinyunit`` or its children; handlers are
attached once per run by :func:`configure_logging`, from the harness config.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinyunit.config import HarnessConfig

LOGGER_NAME = "tinyunit"
DEBUG_LOG_NAME = "debug.log"

_FILE_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s"
_CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def get_logger(child: str | None = None) -> logging.Logger:
    """The ``tinyunit`` logger, or one of its children."""
    if child:
        return logging.getLogger(f"{LOGGER_NAME}.{child}")
    return logging.getLogger(LOGGER_NAME)


def debug_log_path(config: HarnessConfig) -> Path:
    return Path(config.output_dir) / DEBUG_LOG_NAME


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def configure_logging(
    config: HarnessConfig, verbose: bool = False, logger_name: str = LOGGER_NAME
) -> logging.Logger:
    """Send the run's log records to ``<output_dir>/debug.log``.

    Calling it again (a second run in the same process) replaces the
    handlers of the previous run. With ``verbose`` the records are echoed
    to stderr as well. Records do not propagate past the ``tinyunit``
    logger, so a host application's root handlers stay quiet.
    """
    logger = logging.getLogger(logger_name)
    _drop_handlers(logger)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    debug_file = debug_log_path(config)
    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    )
    logger.addHandler(file_handler)

    if verbose:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        logger.addHandler(console)

    logger.debug(
        f"Logging to {debug_file} (default module '{config.default_module}', "
        f"deferred={config.deferred})"
    )
    return logger
