"""CLI for the ``statement_ingest`` package.

This module exposes a callable command handler (``cmd_parse``) and a
Typer-based console interface around it. Environment variables are loaded
from a local ``.env`` using ``python-dotenv`` before any command runs.
Business logic lives in :mod:`statement_ingest.grouper` and friends.
"""

from __future__ import annotations

import os
import sys
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .logging_setup import configure_logging
from .models import ParseReport

_ROW_LIMIT_ENV = "STATEMENT_INGEST_ROW_LIMIT"


class OutputFormat(str, Enum):
    json = "json"
    summary = "summary"


# ---- Small module-level helpers ----------------------------------------------


def _resolve_row_limit(limit: int | None) -> int | None:
    """Resolve the effective row limit.

    An explicit ``limit`` wins. Otherwise ``STATEMENT_INGEST_ROW_LIMIT`` is
    honored when it holds a positive integer; anything else means no limit.
    """

    if limit is not None:
        return limit
    env_val = os.getenv(_ROW_LIMIT_ENV)
    try:
        env_limit = int(env_val) if env_val else None
    except ValueError:
        env_limit = None
    if env_limit is not None and env_limit > 0:
        return env_limit
    return None


def _print_summary(report: ParseReport) -> None:
    from rich.console import Console
    from rich.table import Table

    console = Console()
    table = Table(title="Transactions by account")
    table.add_column("Account")
    table.add_column("Transactions", justify="right")
    table.add_column("Total", justify="right")
    for account, txs in report.accounts.items():
        total = sum((tx.amount for tx in txs), Decimal(0))
        table.add_row(account, str(len(txs)), str(total))
    console.print(table)
    console.print(f"Skipped records: {report.rows_skipped}")


def cmd_parse(
    csv_path: str,
    *,
    limit: int | None = None,
    output_format: OutputFormat = OutputFormat.json,
) -> int:
    """Parse a statement CSV and print the grouped transactions.

    Behavior
    --------
    - Reads ``csv_path`` (UTF-8, header on the first line).
    - Groups transactions per account, stopping after ``limit`` records when
      set (falls back to ``STATEMENT_INGEST_ROW_LIMIT``).
    - ``json`` prints the mapping as a JSON document; ``summary`` prints a
      table of per-account counts and totals.

    Errors are written to stderr and the function returns ``1``. On success,
    returns ``0``.
    """

    from .errors import StatementError
    from .ingest.utils import parse_path
    from .serialize import dump_json

    try:
        report = parse_path(csv_path, _resolve_row_limit(limit))
    except FileNotFoundError:
        print(f"Error: File not found: {csv_path}", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"Error: Permission denied: {csv_path}", file=sys.stderr)
        return 1
    except StatementError as e:
        print(f"Error: Failed to parse statement: {e}", file=sys.stderr)
        return 1

    if output_format is OutputFormat.summary:
        _print_summary(report)
    else:
        print(dump_json(report.accounts))
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Convert a bank-statement CSV export into transactions grouped by account.",
)

# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults).
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--csv-path",
    help="Path to a bank-statement CSV export",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


@app.command("parse")
def parse_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    limit: int | None = typer.Option(
        None,
        min=0,
        help=f"Stop after this many records (falls back to {_ROW_LIMIT_ENV}).",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.json, "--format", help="Output format."
    ),
) -> None:
    """Parse a statement CSV and print transactions grouped by account."""

    code = cmd_parse(str(csv_path), limit=limit, output_format=output_format)
    if code:
        raise typer.Exit(code)


@app.callback()
def _root(
    *,
    log_level: str | None = typer.Option(
        None, help="Log level (falls back to STATEMENT_INGEST_LOG_LEVEL, then INFO)."
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures package logging.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)


if __name__ == "__main__":  # pragma: no cover
    app()
