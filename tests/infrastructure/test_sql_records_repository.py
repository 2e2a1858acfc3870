"""Tests for the SQLAlchemy records repository."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.infrastructure.sql_records_repository import (
    SqlAlchemyRecordsRepository,
)


class _FakeResult:
    def __init__(self, rows: list[dict]) -> None:
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return self._rows


def _build_db_port(results: list[list[dict]]) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_shop_engine.return_value = engine
    return db_port


def test_fetch_snapshot_maps_rows_and_attaches_items() -> None:
    """Rows from each table become domain records."""
    sales = [
        {
            "id": 1,
            "date": datetime(2024, 5, 2, 10, 0),
            "total": Decimal("7.50"),
            "payment_method": "Cash",
            "cashier": "Jane",
            "invoice_number": "INV1000",
        },
        {
            "id": 2,
            "date": "2024-05-02 11:00:00",
            "total": Decimal("3.00"),
            "payment_method": "Card",
            "cashier": "Mike",
            "invoice_number": None,
        },
    ]
    items = [
        {
            "sale_id": 1,
            "product_id": 9,
            "product_name": "Soap",
            "quantity": 3,
            "price": Decimal("2.50"),
            "subtotal": Decimal("7.50"),
        }
    ]
    purchases = [
        {
            "id": 1,
            "date": datetime(2024, 4, 1),
            "quantity": 10,
            "unit_cost": Decimal("1.00"),
            "total": Decimal("10.00"),
            "supplier": "Wholesale",
            "product_id": 9,
        }
    ]
    expenses = [
        {
            "id": 1,
            "date": datetime(2024, 4, 2),
            "category": "Utilities",
            "amount": Decimal("15.00"),
            "description": None,
        }
    ]
    assets = [
        {
            "id": 1,
            "name": "Fridge",
            "category": "Equipment",
            "purchase_value": Decimal("900"),
            "current_value": Decimal("700"),
            "purchase_date": datetime(2022, 1, 1),
            "condition": "fair",
        }
    ]
    products = [
        {
            "id": 9,
            "name": "Soap",
            "price": Decimal("2.50"),
            "stock": 4,
            "min_stock_level": None,
        }
    ]
    db_port = _build_db_port(
        [sales, items, purchases, expenses, assets, products]
    )
    logger = MagicMock()

    snapshot = SqlAlchemyRecordsRepository(db_port, logger=logger).fetch_snapshot()

    assert [sale.id for sale in snapshot.sales] == [1, 2]
    assert snapshot.sales[0].items[0].product_name == "Soap"
    assert snapshot.sales[1].items == ()
    assert snapshot.sales[1].date == datetime(2024, 5, 2, 11, 0)
    assert snapshot.purchases[0].total == Decimal("10.00")
    assert snapshot.expenses[0].description == ""
    assert snapshot.assets[0].current_value == Decimal("700")
    assert snapshot.products[0].min_stock_level is None
    db_port.get_shop_engine.assert_called_once_with()
    logger.info.assert_called_once()
