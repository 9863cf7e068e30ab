#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/logging_utils.py
"""Logging setup for the ``mdtodom`` command.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed by the entry point through ``configure_logging``.
Renderer diagnostics go to these loggers:

- ``mdtodom.renderer``: unknown node types (WARNING), an unbalanced ancestor
  stack (ERROR), traversal summaries (DEBUG)
- ``mdtodom.parsers.markdown``: custom nodes kept for plugin tokens (DEBUG)
- ``mdtodom.utils.html_sanitizer``: markup removed from raw HTML (DEBUG)

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that stay at WARNING unless tracing
_QUIET_LOGGERS = ("bs4", "mistune")


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric logging level.

    Parameters
    ----------
    log_level : int or str
        Numeric level or case-insensitive name (e.g. "info")

    Returns
    -------
    int
        Numeric logging level

    Raises
    ------
    ValueError
        If the name is not a standard logging level

    Examples
    --------
    >>> resolve_log_level("debug")
    10
    >>> resolve_log_level(30)
    30

    """
    if isinstance(log_level, int):
        return log_level

    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Also append log records to this file.
    trace_mode : bool, default False
        Emit timestamps and logger names, and let third-party loggers through.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = resolve_log_level(log_level)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(LOG_FORMAT)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if trace_mode else max(level, logging.WARNING))

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.debug("Logging to file: %s", log_file)

    return root_logger


__all__ = ["configure_logging", "resolve_log_level"]
