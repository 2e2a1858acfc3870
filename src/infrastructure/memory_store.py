"""Caller-owned in-memory store for shop records."""

from collections.abc import Iterable

from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.domain.models import (
    AssetRecord,
    ExpenseRecord,
    Product,
    PurchaseRecord,
    SaleRecord,
    ShopSnapshot,
)


class InMemoryShopStore(ShopRecordsRepositoryPort):
    """Mutable container of record collections.

    The store is owned by its caller and passed explicitly to the code that
    needs it. Reports never read it directly: they work on the immutable
    snapshot returned by :meth:`fetch_snapshot`, so later changes to the
    store do not affect a report already computed.
    """

    def __init__(self, snapshot: ShopSnapshot | None = None) -> None:
        initial = snapshot or ShopSnapshot()
        self._sales: list[SaleRecord] = list(initial.sales)
        self._purchases: list[PurchaseRecord] = list(initial.purchases)
        self._expenses: list[ExpenseRecord] = list(initial.expenses)
        self._assets: list[AssetRecord] = list(initial.assets)
        self._products: list[Product] = list(initial.products)

    def fetch_snapshot(self) -> ShopSnapshot:
        return ShopSnapshot(
            sales=tuple(self._sales),
            purchases=tuple(self._purchases),
            expenses=tuple(self._expenses),
            assets=tuple(self._assets),
            products=tuple(self._products),
        )

    def add_sale(self, sale: SaleRecord) -> None:
        self._sales.append(sale)

    def add_purchase(self, purchase: PurchaseRecord) -> None:
        self._purchases.append(purchase)

    def add_expense(self, expense: ExpenseRecord) -> None:
        self._expenses.append(expense)

    def add_asset(self, asset: AssetRecord) -> None:
        self._assets.append(asset)

    def upsert_product(self, product: Product) -> None:
        """Insert a product or replace the one with the same id."""
        for index, existing in enumerate(self._products):
            if existing.id == product.id:
                self._products[index] = product
                return
        self._products.append(product)

    def replace_products(self, products: Iterable[Product]) -> None:
        self._products = list(products)

    def remove_asset(self, asset_id: int) -> bool:
        """Remove an asset by id, returning True when one was removed."""
        remaining = [asset for asset in self._assets if asset.id != asset_id]
        removed = len(remaining) != len(self._assets)
        self._assets = remaining
        return removed


__all__ = ["InMemoryShopStore"]
