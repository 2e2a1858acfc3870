"""Domain services for the today-scoped dashboard."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import DEFAULT_LOW_STOCK_THRESHOLD
from src.domain.models import (
    DashboardSummary,
    Product,
    SaleRecord,
    ShopSnapshot,
)
from src.domain.policies import is_low_stock, is_sale_on_day
from src.domain.services.metrics import safe_ratio
from src.domain.services.totals import sum_revenue


def filter_sales_for_day(
    sales: Iterable[SaleRecord],
    day: date,
    cashier: str | None = None,
) -> list[SaleRecord]:
    """Return sales made on a local calendar day.

    Args:
        sales: Sales to filter.
        day: Calendar day to keep.
        cashier: Optional cashier name; when set only their sales are kept.

    Returns:
        list[SaleRecord]: Matching sales in input order.
    """
    return [
        sale
        for sale in sales
        if is_sale_on_day(sale, day)
        and (cashier is None or sale.cashier == cashier)
    ]


def find_low_stock_products(
    products: Iterable[Product],
    default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> list[Product]:
    """Return products whose stock is strictly below their threshold."""
    return [
        product
        for product in products
        if is_low_stock(product, default_threshold)
    ]


def compute_dashboard_summary(
    snapshot: ShopSnapshot,
    *,
    today: date,
    cashier: str | None = None,
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> DashboardSummary:
    """Compute today's sales figures and low-stock alerts.

    Args:
        snapshot: Record collections to summarize.
        today: Calendar day treated as today.
        cashier: Optional cashier name restricting the sales considered.
        low_stock_threshold: Threshold for products without their own.

    Returns:
        DashboardSummary: Today's count, revenue, average sale, and
        low-stock products.
    """
    today_sales = filter_sales_for_day(snapshot.sales, today, cashier)
    revenue = sum_revenue(today_sales)
    low_stock = find_low_stock_products(
        snapshot.products,
        low_stock_threshold,
    )
    return DashboardSummary(
        today_sales_count=len(today_sales),
        today_revenue=revenue,
        today_average_sale=safe_ratio(revenue, Decimal(len(today_sales))),
        low_stock_count=len(low_stock),
        low_stock_products=low_stock,
        total_products=len(snapshot.products),
    )


__all__ = [
    "filter_sales_for_day",
    "find_low_stock_products",
    "compute_dashboard_summary",
]
