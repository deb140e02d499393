"""Central logging configuration for the package."""
from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "ods_styles"
_DEFAULT_LEVEL = logging.INFO
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger. Handlers are left to the application."""
    return logging.getLogger(name)


def _cli_handler(logger: logging.Logger) -> Optional[logging.StreamHandler]:
    for handler in logger.handlers:
        if getattr(handler, "_ods_styles", False):
            return handler
    return None


def set_verbose(enabled: bool = True) -> logging.Logger:
    """
    Configure the package logger for command-line use: one stderr handler on
    `ods_styles` only, DEBUG when `enabled`. The root logger is not touched.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = _cli_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._ods_styles = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stderr)
    logger.setLevel(logging.DEBUG if enabled else _DEFAULT_LEVEL)
    return logger
