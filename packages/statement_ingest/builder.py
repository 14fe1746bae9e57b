"""Row → Transaction mapping.

Policy for one decoded :class:`~statement_ingest.models.Row`:

- ``date`` must be ``DD/MM/YYYY`` (single-digit day/month and any year
  width accepted).
- ``description`` is required and splits on the first ``-`` into payee and
  note; both halves are trimmed and runs of spaces in the payee collapse to
  one space. Tabs and other whitespace are left alone.
- ``amount`` is the debit when present, else the credit, else
  :data:`FALLBACK_AMOUNT`. No sign is applied to either side.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal

from .errors import InvalidDate, MissingDescription
from .models import Row, Transaction

# Day and month take one or two digits; the year takes any number of digits,
# so "05/03/24" is the year 24, not 2024.
_DATE_RE = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]+)")

# Suspect: rows with neither debit nor credit get 64.0 rather than zero.
# Kept so existing outputs do not shift until the intended value is confirmed.
FALLBACK_AMOUNT = Decimal("64.0")

_SPACE_RUN_RE = re.compile(r" +")


def parse_date(text: str) -> date:
    m = _DATE_RE.fullmatch(text)
    if m is None:
        raise InvalidDate(text)
    try:
        day, month, year = (int(g) for g in m.groups())
        return date(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise InvalidDate(text) from exc


def collapse_spaces(text: str) -> str:
    """Replace every run of literal spaces with a single space."""

    return _SPACE_RUN_RE.sub(" ", text)


def split_description(description: str) -> tuple[str, str | None]:
    """Split ``"payee - note"`` on the first hyphen.

    Returns the trimmed payee (possibly empty) and the trimmed note, or
    ``None`` for the note when the text has no hyphen.
    """

    head, sep, tail = description.partition("-")
    return head.strip(), (tail.strip() if sep else None)


def resolve_amount(row: Row) -> Decimal:
    if row.debit is not None:
        return row.debit
    if row.credit is not None:
        return row.credit
    return FALLBACK_AMOUNT


def build_transaction(row: Row) -> Transaction:
    """Build a :class:`Transaction` from ``row`` or raise a ``StatementError``.

    Raises
    ------
    InvalidDate
        ``row.date`` is not ``DD/MM/YYYY``.
    MissingDescription
        ``row.description`` is absent.
    """

    tx_date = parse_date(row.date)
    if row.description is None:
        raise MissingDescription()

    payee, note = split_description(row.description)
    return Transaction(
        date=tx_date,
        payee=collapse_spaces(payee),
        note=note,
        amount=resolve_amount(row),
        is_transfer=False,
    )


__all__ = [
    "FALLBACK_AMOUNT",
    "build_transaction",
    "collapse_spaces",
    "parse_date",
    "resolve_amount",
    "split_description",
]
