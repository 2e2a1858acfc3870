"""Mapping helpers from raw mappings to domain records.

Raw records use the camelCase keys stored by the point-of-sale app
(``paymentMethod``, ``unitCost``, ``purchaseValue``...). Snake_case keys
are accepted as well so SQL rows can go through the same helpers.
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from src.domain.models import (
    AssetRecord,
    ExpenseRecord,
    Product,
    PurchaseRecord,
    SaleItem,
    SaleRecord,
)
from src.utils.decimal_utils import coerce_decimal


def _get(data: Mapping[str, Any], camel: str, snake: str, default=None):
    if camel in data:
        return data[camel]
    return data.get(snake, default)


def parse_datetime(value) -> datetime:
    """Parse ISO timestamps, dates, or datetimes into a datetime.

    Raises:
        ValueError: If the value is missing or not ISO formatted.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not value:
        raise ValueError("Missing date value")
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _optional_int(value) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def sale_item_from_mapping(data: Mapping[str, Any]) -> SaleItem:
    return SaleItem(
        product_id=int(_get(data, "productId", "product_id")),
        product_name=str(_get(data, "productName", "product_name", "")),
        quantity=int(data.get("quantity", 0)),
        price=coerce_decimal(data.get("price")),
        subtotal=coerce_decimal(data.get("subtotal")),
    )


def sale_from_mapping(data: Mapping[str, Any]) -> SaleRecord:
    items = tuple(
        sale_item_from_mapping(item) for item in data.get("items") or ()
    )
    return SaleRecord(
        id=int(data["id"]),
        date=parse_datetime(data.get("date")),
        total=coerce_decimal(data.get("total")),
        payment_method=str(_get(data, "paymentMethod", "payment_method", "")),
        cashier=str(data.get("cashier", "")),
        items=items,
        invoice_number=_get(data, "invoiceNumber", "invoice_number"),
    )


def purchase_from_mapping(data: Mapping[str, Any]) -> PurchaseRecord:
    return PurchaseRecord(
        id=int(data["id"]),
        date=parse_datetime(data.get("date")),
        quantity=int(data.get("quantity", 0)),
        unit_cost=coerce_decimal(_get(data, "unitCost", "unit_cost")),
        total=coerce_decimal(data.get("total")),
        supplier=str(data.get("supplier", "")),
        product_id=_optional_int(_get(data, "productId", "product_id")),
    )


def expense_from_mapping(data: Mapping[str, Any]) -> ExpenseRecord:
    return ExpenseRecord(
        id=int(data["id"]),
        date=parse_datetime(data.get("date")),
        category=str(data.get("category", "")),
        amount=coerce_decimal(data.get("amount")),
        description=str(data.get("description") or ""),
    )


def asset_from_mapping(data: Mapping[str, Any]) -> AssetRecord:
    return AssetRecord(
        id=int(data["id"]),
        purchase_value=coerce_decimal(
            _get(data, "purchaseValue", "purchase_value")
        ),
        current_value=coerce_decimal(
            _get(data, "currentValue", "current_value")
        ),
        purchase_date=parse_datetime(
            _get(data, "purchaseDate", "purchase_date")
        ),
        condition=str(data.get("condition", "")).lower(),
        name=str(data.get("name") or ""),
        category=str(data.get("category") or ""),
    )


def product_from_mapping(data: Mapping[str, Any]) -> Product:
    return Product(
        id=int(data["id"]),
        price=coerce_decimal(data.get("price")),
        stock=int(data.get("stock", 0)),
        min_stock_level=_optional_int(
            _get(data, "minStockLevel", "min_stock_level")
        ),
        name=str(data.get("name") or ""),
    )


__all__ = [
    "parse_datetime",
    "sale_item_from_mapping",
    "sale_from_mapping",
    "purchase_from_mapping",
    "expense_from_mapping",
    "asset_from_mapping",
    "product_from_mapping",
]
