"""SQLAlchemy-backed repository for shop records."""

from collections import defaultdict
from dataclasses import replace

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.domain.models import SaleItem, ShopSnapshot
from src.infrastructure.record_mappers import (
    asset_from_mapping,
    expense_from_mapping,
    product_from_mapping,
    purchase_from_mapping,
    sale_from_mapping,
    sale_item_from_mapping,
)

_SALES_QUERY = """
    SELECT id, date, total, payment_method, cashier, invoice_number
    FROM sales
    ORDER BY id
"""
_SALE_ITEMS_QUERY = """
    SELECT sale_id, product_id, product_name, quantity, price, subtotal
    FROM sale_items
    ORDER BY sale_id, product_id
"""
_PURCHASES_QUERY = """
    SELECT id, date, quantity, unit_cost, total, supplier, product_id
    FROM purchases
    ORDER BY id
"""
_EXPENSES_QUERY = """
    SELECT id, date, category, amount, description
    FROM expenses
    ORDER BY id
"""
_ASSETS_QUERY = """
    SELECT id, name, category, purchase_value, current_value,
           purchase_date, condition
    FROM assets
    ORDER BY id
"""
_PRODUCTS_QUERY = """
    SELECT id, name, price, stock, min_stock_level
    FROM products
    ORDER BY id
"""


class SqlAlchemyRecordsRepository(ShopRecordsRepositoryPort):
    """Repository reading shop records from a SQL database."""

    def __init__(self, db_port: DatabaseEnginePort, logger) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the shop engine.
            logger: Logger used for info messages.
        """
        self._db_port = db_port
        self._logger = logger

    def fetch_snapshot(self) -> ShopSnapshot:
        engine = self._db_port.get_shop_engine()
        with engine.connect() as conn:
            sale_rows = conn.execute(text(_SALES_QUERY)).mappings().all()
            item_rows = conn.execute(text(_SALE_ITEMS_QUERY)).mappings().all()
            purchase_rows = (
                conn.execute(text(_PURCHASES_QUERY)).mappings().all()
            )
            expense_rows = conn.execute(text(_EXPENSES_QUERY)).mappings().all()
            asset_rows = conn.execute(text(_ASSETS_QUERY)).mappings().all()
            product_rows = conn.execute(text(_PRODUCTS_QUERY)).mappings().all()

        items_by_sale: dict[int, list[SaleItem]] = defaultdict(list)
        for row in item_rows:
            items_by_sale[int(row["sale_id"])].append(
                sale_item_from_mapping(row)
            )
        sales = tuple(
            replace(
                sale_from_mapping(row),
                items=tuple(items_by_sale.get(int(row["id"]), ())),
            )
            for row in sale_rows
        )
        snapshot = ShopSnapshot(
            sales=sales,
            purchases=tuple(purchase_from_mapping(row) for row in purchase_rows),
            expenses=tuple(expense_from_mapping(row) for row in expense_rows),
            assets=tuple(asset_from_mapping(row) for row in asset_rows),
            products=tuple(product_from_mapping(row) for row in product_rows),
        )
        self._logger.info(
            f"Fetched {len(snapshot.sales)} sales and "
            f"{len(snapshot.products)} products from the shop database"
        )
        return snapshot


__all__ = ["SqlAlchemyRecordsRepository"]
