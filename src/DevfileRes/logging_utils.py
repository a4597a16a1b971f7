"""Logging helpers for DevfileRes."""

from __future__ import annotations

import logging

_LOGGER_NAME = "DevfileRes"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the DevfileRes hierarchy.

    Module names that already start with ``DevfileRes.`` are used as-is.
    """
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name == _LOGGER_NAME or name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send DevfileRes records to stderr at INFO (or DEBUG when verbose)."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Streamlit reruns the script; avoid stacking handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[DevfileRes] %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
