"""File-level entry point shared by the CLI and library callers."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from ..grouper import parse_report
from ..models import ParseReport


def parse_path(csv_path: str | PathLike[str], limit: int | None = None) -> ParseReport:
    """Open ``csv_path`` as UTF-8 CSV and run :func:`parse_report` over it.

    A leading byte-order mark is dropped. Invalid UTF-8 bytes are
    surrogate-escaped so only the records holding them are skipped.

    ``FileNotFoundError``/``PermissionError`` from opening the file propagate
    unchanged.
    """

    p = Path(csv_path)
    with p.open(encoding="utf-8-sig", errors="surrogateescape", newline="") as f:
        return parse_report(f, limit)


__all__ = ["parse_path"]
