"""Group a statement's transactions by account.

Failure semantics
-----------------
- A record that cannot be decoded is dropped, counted in
  :attr:`ParseReport.rows_skipped` and logged at DEBUG; the batch continues.
- A decoded row without an account raises :class:`MissingAccount`.
- A row the builder rejects (:class:`InvalidDate`, :class:`MissingDescription`)
  aborts the batch with that error.

In both abort cases nothing accumulated so far is returned.

``limit`` counts every record pulled from the decoder, undecodable ones
included. When the count reaches ``limit`` the batch stops and the partial
mapping is returned as a success.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .builder import build_transaction
from .errors import MissingAccount, StatementError
from .ingest.rows import iter_rows
from .logging_setup import get_logger
from .models import AccountTransactions, ParseReport

logger = get_logger("statement_ingest.grouper")


def parse_report(source: TextIO, limit: int | None = None) -> ParseReport:
    """Decode ``source`` and group the resulting transactions by account.

    Parameters
    ----------
    source:
        Text stream positioned at the CSV header line.
    limit:
        Maximum number of records to consider; ``None`` reads to the end.

    Raises
    ------
    ValueError
        ``limit`` is negative.
    StatementError
        A row has no account, an invalid date, or no description. ``line`` on
        the error points at the offending record.
    """

    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    accounts: AccountTransactions = {}
    considered = 0
    skipped = 0

    for decoded in iter_rows(source):
        if considered == limit:
            logger.debug("row limit %d reached; stopping before line %d", limit, decoded.line)
            break
        considered += 1

        row = decoded.row
        if row is None:
            skipped += 1
            logger.debug("skipping undecodable record at line %d: %s", decoded.line, decoded.error)
            continue

        if row.account is None:
            raise MissingAccount(line=decoded.line)

        try:
            tx = build_transaction(row)
        except StatementError as exc:
            if exc.line is None:
                exc.line = decoded.line
            raise

        # Interned so every transaction of one account shares a single key object.
        accounts.setdefault(sys.intern(row.account), []).append(tx)

    logger.info(
        "parsed %d transaction(s) across %d account(s); %d record(s) skipped",
        sum(len(v) for v in accounts.values()),
        len(accounts),
        skipped,
    )
    return ParseReport(accounts=accounts, rows_considered=considered, rows_skipped=skipped)


def parse(source: TextIO, limit: int | None = None) -> AccountTransactions:
    """Return transactions from ``source`` keyed by account identifier.

    See :func:`parse_report` for parameters and errors.
    """

    return parse_report(source, limit).accounts


__all__ = ["parse", "parse_report"]
