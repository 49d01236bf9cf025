"""Logging setup for the generator.

Diagnostics always go to stderr: when running as a protoc plugin stdout
carries the binary response.
"""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER = "twirp_codegen"
LOG_LEVEL_ENV = "TWIRP_CODEGEN_LOG_LEVEL"
LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Install a single stderr handler on the package logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not any(getattr(h, "_twirp_codegen", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._twirp_codegen = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
