"""Decode a bank-statement CSV into :class:`~statement_ingest.models.Row` values.

Parsing of quoting, delimiters, and embedded newlines is left to the stdlib
:mod:`csv` module (RFC 4180 rules, header on the first line). This module only
maps each record onto the ``Row`` model.

Contract
--------
- One :class:`DecodedRow` is produced per data record, in input order.
- A record that cannot be decoded is not an exception here: it is reported
  with ``row=None`` and a short ``error`` string so the caller decides whether
  to skip it. Undecodable means the reader raised ``csv.Error``, the record
  has a different number of cells than the header, a cell holds bytes that
  are not valid UTF-8 (surrogate-escaped by the opener), or ``Row`` validation
  failed (e.g., missing ``Date`` column, non-numeric ``Debit``).
- A leading byte-order mark on the header line is ignored.
"""

from __future__ import annotations

import csv
import re
from collections.abc import Iterator
from typing import NamedTuple, TextIO

from pydantic import ValidationError

from ..models import Row

# Lone surrogates left behind by ``errors="surrogateescape"`` mark bytes that
# were not valid UTF-8.
_UNDECODABLE_RE = re.compile("[\udc80-\udcff]")

_BOM = "\ufeff"


class DecodedRow(NamedTuple):
    """A decoded record or the reason it could not be decoded."""

    line: int
    """1-based physical line where the record ended."""

    row: Row | None
    error: str | None


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def _decode(record: dict[str | None, object]) -> tuple[Row | None, str | None]:
    # DictReader collects surplus cells under ``None`` and fills short records
    # with ``None`` values.
    if None in record:
        return None, "record has more cells than the header"
    if any(v is None for v in record.values()):
        return None, "record has fewer cells than the header"
    if any(_UNDECODABLE_RE.search(v) for v in record.values() if isinstance(v, str)):
        return None, "record contains bytes that are not valid UTF-8"
    try:
        return Row.model_validate(record), None
    except ValidationError as exc:
        return None, _describe_validation_error(exc)


def iter_rows(source: TextIO) -> Iterator[DecodedRow]:
    """Yield one :class:`DecodedRow` per data record of ``source``.

    ``source`` should be opened with ``newline=""`` so quoted newlines survive.
    The iterator is single-pass; supply a fresh stream to decode again.
    """

    reader = csv.DictReader(source)
    try:
        fieldnames = reader.fieldnames
    except csv.Error as exc:
        yield DecodedRow(line=reader.line_num, row=None, error=f"malformed CSV header: {exc}")
        fieldnames = None
    # A byte-order mark left by the exporting tool would otherwise stick to the
    # first column name.
    if fieldnames and fieldnames[0].startswith(_BOM):
        reader.fieldnames = [fieldnames[0].removeprefix(_BOM), *fieldnames[1:]]
    while True:
        try:
            record = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            yield DecodedRow(line=reader.line_num, row=None, error=f"malformed CSV: {exc}")
            continue

        row, error = _decode(record)
        yield DecodedRow(line=reader.line_num, row=row, error=error)


__all__ = ["DecodedRow", "iter_rows"]
