"""Public interface for the ``statement_ingest`` package.

This module re-exports the parsing entry points, models, and error types as
the stable import surface. There is no runtime logic here.
"""

from .builder import FALLBACK_AMOUNT, build_transaction
from .errors import InvalidDate, MissingAccount, MissingDescription, StatementError
from .grouper import parse, parse_report
from .ingest.utils import parse_path
from .models import AccountTransactions, ParseReport, Row, Transaction
from .serialize import dump_json, to_jsonable

__all__ = [
    # Parsing
    "parse",
    "parse_report",
    "parse_path",
    "build_transaction",
    "FALLBACK_AMOUNT",
    # Serialization
    "dump_json",
    "to_jsonable",
    # Models / types
    "Row",
    "Transaction",
    "ParseReport",
    "AccountTransactions",
    # Errors
    "StatementError",
    "InvalidDate",
    "MissingDescription",
    "MissingAccount",
]
