"""Logging setup for applications embedding notion2html."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "notion2html"

_HANDLER_MARKER = "_notion2html_handler"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger.

    The renderer reports soft failures (unknown block types, malformed dates,
    degenerate tables) as WARNING records on ``notion2html.*`` loggers. This
    helper routes them somewhere visible without touching the root logger, so
    it can be called from host applications that own their own logging setup.
    Calling it again replaces the handlers it installed earlier.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    propagate : bool, default False
        Whether records should also reach ancestor (root) handlers.

    Returns
    -------
    logging.Logger
        The configured ``notion2html`` logger.

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = propagate
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:  # pragma: no cover - handled at runtime
            package_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        package_logger.addHandler(handler)

    return package_logger
