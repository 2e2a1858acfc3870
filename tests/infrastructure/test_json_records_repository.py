"""Tests for the JSON records repository."""

from datetime import datetime, timezone
from decimal import Decimal
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure.json_records_repository import JsonRecordsRepository
from src.utils.utils import get_project_root


def _write(tmp_path, document) -> Path:
    path = tmp_path / "shop.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_missing_file_raises(tmp_path) -> None:
    """A missing data file is a configuration error."""
    with pytest.raises(RuntimeError):
        JsonRecordsRepository(tmp_path / "missing.json", logger=MagicMock())


def test_fetch_snapshot_parses_camel_case_records(tmp_path) -> None:
    """Records stored by the mobile app are mapped to domain records."""
    path = _write(
        tmp_path,
        {
            "sales": [
                {
                    "id": 1,
                    "date": "2024-05-02T10:15:00.000Z",
                    "cashier": "Jane",
                    "total": 12.5,
                    "paymentMethod": "Card",
                    "items": [
                        {
                            "productId": 4,
                            "productName": "Milk",
                            "quantity": 5,
                            "price": 2.5,
                            "subtotal": 12.5,
                        }
                    ],
                }
            ],
            "purchases": [
                {
                    "id": 1,
                    "date": "2024-04-28",
                    "quantity": 10,
                    "unitCost": "1.20",
                    "total": "12.00",
                    "supplier": "Dairy Co",
                    "productId": 4,
                }
            ],
            "expenses": [
                {
                    "id": 1,
                    "date": "2024-05-01T12:00:00",
                    "category": "Rent",
                    "amount": 80,
                }
            ],
            "assets": [
                {
                    "id": 1,
                    "purchaseValue": 1500,
                    "currentValue": 1200,
                    "purchaseDate": "2023-01-15",
                    "condition": "Good",
                }
            ],
            "products": [
                {"id": 4, "price": 2.5, "stock": 8, "minStockLevel": 10}
            ],
        },
    )
    logger = MagicMock()

    snapshot = JsonRecordsRepository(path, logger=logger).fetch_snapshot()

    sale = snapshot.sales[0]
    assert sale.date == datetime(2024, 5, 2, 10, 15, tzinfo=timezone.utc)
    assert sale.total == Decimal("12.5")
    assert sale.payment_method == "Card"
    assert sale.items[0].product_name == "Milk"
    assert snapshot.purchases[0].unit_cost == Decimal("1.20")
    assert snapshot.purchases[0].date == datetime(2024, 4, 28)
    assert snapshot.expenses[0].amount == Decimal("80")
    assert snapshot.assets[0].condition == "good"
    assert snapshot.products[0].min_stock_level == 10
    logger.info.assert_called_once()


def test_missing_collections_are_empty(tmp_path) -> None:
    """Absent arrays are treated as empty collections."""
    path = _write(tmp_path, {"sales": []})

    snapshot = JsonRecordsRepository(path, logger=MagicMock()).fetch_snapshot()

    assert snapshot.sales == ()
    assert snapshot.products == ()


def test_invalid_record_names_collection_and_index(tmp_path) -> None:
    """Malformed records raise a ValueError pointing at the record."""
    path = _write(
        tmp_path,
        {"expenses": [{"id": 1, "date": "yesterday", "amount": 5}]},
    )

    with pytest.raises(ValueError, match="'expenses' at index 0"):
        JsonRecordsRepository(path, logger=MagicMock()).fetch_snapshot()


def test_non_object_document_is_rejected(tmp_path) -> None:
    """Top-level arrays are not a valid document."""
    path = _write(tmp_path, [1, 2, 3])

    with pytest.raises(ValueError):
        JsonRecordsRepository(path, logger=MagicMock()).fetch_snapshot()


def test_bundled_sample_data_loads() -> None:
    """The sample data file shipped under data/ is readable."""
    path = get_project_root() / "data" / "sample_shop.json"

    snapshot = JsonRecordsRepository(path, logger=MagicMock()).fetch_snapshot()

    assert len(snapshot.sales) == 3
    assert len(snapshot.products) == 3
