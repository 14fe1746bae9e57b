import json
from datetime import date
from decimal import Decimal

from statement_ingest import Transaction, dump_json, to_jsonable


def _accounts():
    return {
        "12345": [
            Transaction(
                date=date(2024, 3, 5),
                payee="Acme Corp",
                note="monthly fee",
                amount=Decimal("12.50"),
            ),
            Transaction(date=date(2024, 3, 7), payee="Payroll", note=None, amount=Decimal("2500")),
        ],
        "98765": [],
    }


def test_to_jsonable_shapes_records():
    out = to_jsonable(_accounts())
    assert out["12345"][0] == {
        "date": "2024-03-05",
        "payee": "Acme Corp",
        "note": "monthly fee",
        "amount": "12.50",
        "is_transfer": False,
    }
    assert out["12345"][1]["note"] is None
    assert out["98765"] == []


def test_dump_json_keeps_account_order():
    doc = json.loads(dump_json(_accounts()))
    assert list(doc) == ["12345", "98765"]
    assert doc["12345"][1]["amount"] == "2500"
