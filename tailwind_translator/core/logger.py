from __future__ import annotations

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "configure_logging", "ROOT_LOGGER_NAME"]

ROOT_LOGGER_NAME = "tailwind_translator"

_LOG_FORMAT = "%(levelname)s: %(message)s"
_VERBOSE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the package namespace.

    Module names are used as-is when they already live under the package,
    anything else is nested below it so a single handler covers the tool.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False, stream=None) -> logging.Logger:
    """Attach a stream handler to the package logger (CLI use only)."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, "_tailwind_translator", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(_VERBOSE_FORMAT if verbose else _LOG_FORMAT)
    )
    handler._tailwind_translator = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    return root
