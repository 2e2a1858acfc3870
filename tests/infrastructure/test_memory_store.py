"""Tests for the in-memory shop store."""

from datetime import datetime
from decimal import Decimal

from src.domain.models import (
    AssetRecord,
    ExpenseRecord,
    Product,
    PurchaseRecord,
    SaleRecord,
    ShopSnapshot,
)
from src.infrastructure.memory_store import InMemoryShopStore

_WHEN = datetime(2024, 5, 2, 9, 0)


def test_snapshot_is_isolated_from_later_changes() -> None:
    """A snapshot does not change when the store is updated afterwards."""
    store = InMemoryShopStore()
    store.add_sale(SaleRecord(1, _WHEN, Decimal("10"), "Cash", "Jane"))

    snapshot = store.fetch_snapshot()
    store.add_sale(SaleRecord(2, _WHEN, Decimal("20"), "Cash", "Jane"))

    assert len(snapshot.sales) == 1
    assert len(store.fetch_snapshot().sales) == 2


def test_store_accepts_every_collection() -> None:
    """Each add method feeds its own collection."""
    store = InMemoryShopStore()
    store.add_purchase(
        PurchaseRecord(1, _WHEN, 2, Decimal("3"), Decimal("6"), "Supplier")
    )
    store.add_expense(ExpenseRecord(1, _WHEN, "Rent", Decimal("50")))
    store.add_asset(
        AssetRecord(1, Decimal("100"), Decimal("80"), _WHEN, "good")
    )
    store.upsert_product(Product(id=1, price=Decimal("2"), stock=5))

    snapshot = store.fetch_snapshot()

    assert len(snapshot.purchases) == 1
    assert len(snapshot.expenses) == 1
    assert len(snapshot.assets) == 1
    assert len(snapshot.products) == 1


def test_upsert_product_replaces_by_id() -> None:
    """Upserting an existing id replaces the product in place."""
    store = InMemoryShopStore(
        ShopSnapshot(products=(Product(id=1, price=Decimal("2"), stock=5),))
    )

    store.upsert_product(Product(id=1, price=Decimal("2"), stock=9))

    assert store.fetch_snapshot().products == (
        Product(id=1, price=Decimal("2"), stock=9),
    )


def test_replace_products_and_remove_asset() -> None:
    """Products can be swapped wholesale and assets removed by id."""
    store = InMemoryShopStore(
        ShopSnapshot(
            assets=(
                AssetRecord(1, Decimal("100"), Decimal("80"), _WHEN, "good"),
            ),
        )
    )

    store.replace_products([Product(id=3, price=Decimal("1"), stock=1)])

    assert store.remove_asset(1) is True
    assert store.remove_asset(1) is False
    snapshot = store.fetch_snapshot()
    assert snapshot.assets == ()
    assert [product.id for product in snapshot.products] == [3]
