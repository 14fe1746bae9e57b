"""Pytest configuration for test isolation.

Puts the workspace ``packages/`` directory on ``sys.path`` so
``statement_ingest`` imports without an install, and keeps each test hermetic
with respect to ``STATEMENT_INGEST_*`` environment variables and the
package's process-wide logging configuration.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR)] if p not in sys.path]


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STATEMENT_INGEST_ROW_LIMIT", raising=False)
    monkeypatch.delenv("STATEMENT_INGEST_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logging():
    """Undo ``configure_logging`` so ``caplog`` sees package records again."""

    import statement_ingest.logging_setup as logging_setup

    yield

    logger = logging.getLogger("statement_ingest")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging_setup._CONFIGURED = False
