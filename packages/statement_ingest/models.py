"""Data models for ``statement_ingest``.

``Row`` is the loosely-typed shape of one decoded CSV record; it is validated
with pydantic so header aliases and optional numeric cells are handled in one
place. ``Transaction`` is the finished output record and is a frozen
``dataclass`` so it cannot change once built.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as Date
from decimal import Decimal
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Input row
# ---------------------------------------------------------------------------


class Row(BaseModel):
    """One decoded statement line.

    Each field accepts either its own name (``date``) or the capitalized
    column label used by the bank export (``Date``). Other columns are
    ignored. Empty optional cells are treated as absent.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date: str = Field(alias="Date")
    account: str | None = Field(default=None, alias="Account")
    description: str | None = Field(default=None, alias="Description")
    credit: Decimal | None = Field(default=None, alias="Credit")
    debit: Decimal | None = Field(default=None, alias="Debit")

    @field_validator("account", "description", mode="before")
    @classmethod
    def _empty_as_none(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v

    @field_validator("credit", "debit", mode="before")
    @classmethod
    def _amount_cell(cls, v: Any) -> Any:
        # Cells are parsed verbatim: padding such as " 12.50" and digit
        # separators are rejected rather than cleaned up. NaN/Infinity stay
        # rejected by the ``Decimal`` field.
        if isinstance(v, str):
            if v == "":
                return None
            if v != v.strip():
                raise ValueError("amount has surrounding whitespace")
            if "_" in v:
                raise ValueError("amount has digit separators")
        return v


# ---------------------------------------------------------------------------
# Output records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single normalized financial movement.

    ``payee`` never contains two consecutive spaces. ``is_transfer`` is
    reserved for a later classification step and is always ``False`` today.
    """

    date: Date
    payee: str
    note: str | None
    amount: Decimal
    is_transfer: bool = False


AccountTransactions: TypeAlias = dict[str, list[Transaction]]
"""Transactions keyed by account identifier, each list in input order."""


@dataclass(frozen=True, slots=True)
class ParseReport:
    """Outcome of one batch.

    Attributes
    ----------
    accounts:
        The grouped transactions.
    rows_considered:
        Records counted against the row limit (decoded or not).
    rows_skipped:
        Records dropped because they could not be decoded.
    """

    accounts: AccountTransactions
    rows_considered: int
    rows_skipped: int


__all__ = ["AccountTransactions", "ParseReport", "Row", "Transaction"]
