"""Per-collection reducers for shop records."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    AssetRecord,
    CategoryTotals,
    ExpenseRecord,
    Product,
    PurchaseRecord,
    SaleRecord,
    ShopSnapshot,
)
from src.utils.decimal_utils import coerce_decimal, sum_decimals


def sum_revenue(sales: Iterable[SaleRecord]) -> Decimal:
    """Return the sum of sale totals."""
    return sum_decimals(coerce_decimal(sale.total) for sale in sales)


def sum_cost(purchases: Iterable[PurchaseRecord]) -> Decimal:
    """Return the sum of purchase totals."""
    return sum_decimals(
        coerce_decimal(purchase.total) for purchase in purchases
    )


def sum_expenses(expenses: Iterable[ExpenseRecord]) -> Decimal:
    """Return the sum of expense amounts."""
    return sum_decimals(
        coerce_decimal(expense.amount) for expense in expenses
    )


def sum_assets_value(assets: Iterable[AssetRecord]) -> Decimal:
    """Return the sum of current asset values."""
    return sum_decimals(
        coerce_decimal(asset.current_value) for asset in assets
    )


def sum_assets_purchase_value(assets: Iterable[AssetRecord]) -> Decimal:
    """Return the sum of asset purchase values."""
    return sum_decimals(
        coerce_decimal(asset.purchase_value) for asset in assets
    )


def sum_inventory_value(products: Iterable[Product]) -> Decimal:
    """Return the stock valuation at selling price."""
    return sum_decimals(
        coerce_decimal(product.price) * product.stock for product in products
    )


def sum_purchase_quantity(purchases: Iterable[PurchaseRecord]) -> int:
    """Return the number of units purchased."""
    return sum(purchase.quantity for purchase in purchases)


def compute_category_totals(snapshot: ShopSnapshot) -> CategoryTotals:
    """Reduce every collection of a snapshot to its total.

    Args:
        snapshot: Record collections to reduce.

    Returns:
        CategoryTotals: Revenue, cost, expense, asset, and inventory totals.
    """
    return CategoryTotals(
        revenue=sum_revenue(snapshot.sales),
        cost=sum_cost(snapshot.purchases),
        expenses=sum_expenses(snapshot.expenses),
        assets_value=sum_assets_value(snapshot.assets),
        assets_purchase_value=sum_assets_purchase_value(snapshot.assets),
        inventory_value=sum_inventory_value(snapshot.products),
        sale_count=len(snapshot.sales),
    )


__all__ = [
    "sum_revenue",
    "sum_cost",
    "sum_expenses",
    "sum_assets_value",
    "sum_assets_purchase_value",
    "sum_inventory_value",
    "sum_purchase_quantity",
    "compute_category_totals",
]
