"""Logging configuration for the ``statement_ingest`` package.

What the package logs:

- ``statement_ingest.grouper`` at DEBUG: each record dropped because it could
  not be decoded (with its line number and reason), and the point where a
  row limit stopped the batch.
- ``statement_ingest.grouper`` at INFO: one summary line per completed batch
  (transactions, accounts, skipped records).

Errors are never logged by the package; they are raised and the CLI prints them.

``configure_logging(...)`` attaches one ``StreamHandler`` to the package root
logger and is called by the CLI at startup. Library modules only call
``get_logger(...)``, which keeps the package silent (``NullHandler``) until a
host application configures logging.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "statement_ingest"
_LEVEL_ENV = "STATEMENT_INGEST_LOG_LEVEL"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        # Numeric strings or standard level names (INFO/DEBUG/etc.).
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        return logging.INFO
    env_val = os.getenv(_LEVEL_ENV)
    if env_val:
        return _parse_level(env_val)
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger exactly once.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level-name string (e.g., ``"DEBUG"``). If
        ``None``, defaults to the ``STATEMENT_INGEST_LOG_LEVEL`` environment
        variable when set, otherwise ``logging.INFO``.
    fmt:
        Optional logging format string. Defaults to
        ``"%(asctime)s %(name)s %(levelname)s %(message)s"``.
    stream:
        Output stream for the ``StreamHandler`` (defaults to ``sys.stderr``
        as resolved at call time).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    # Drop NullHandlers so records are not swallowed after configuration.
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, attaching a ``NullHandler`` to the package
    root when nothing has been configured yet."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
