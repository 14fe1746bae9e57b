"""JSON-friendly views of grouped transactions.

Dates serialize as ``YYYY-MM-DD`` and amounts as decimal strings (pydantic's
JSON mode for ``Decimal``), so no precision is lost on the way out.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from .models import AccountTransactions, Transaction

_ACCOUNTS_ADAPTER: TypeAdapter[dict[str, list[Transaction]]] = TypeAdapter(
    dict[str, list[Transaction]]
)


def to_jsonable(accounts: AccountTransactions) -> dict[str, list[dict[str, Any]]]:
    return _ACCOUNTS_ADAPTER.dump_python(accounts, mode="json")


def dump_json(accounts: AccountTransactions, *, indent: int | None = 2) -> str:
    """Serialize ``accounts`` to a JSON document (keys in first-seen order)."""

    return _ACCOUNTS_ADAPTER.dump_json(accounts, indent=indent).decode("utf-8")


__all__ = ["dump_json", "to_jsonable"]
