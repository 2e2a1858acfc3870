"""Tests for the today-scoped dashboard service and stock policies."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from src.domain.models import Product, SaleRecord, ShopSnapshot
from src.domain.policies import is_low_stock, is_sale_on_day
from src.domain.services.dashboard import (
    compute_dashboard_summary,
    filter_sales_for_day,
)


def _sale(sale_id: int, when: datetime, total: str, cashier: str = "Jane"):
    return SaleRecord(
        id=sale_id,
        date=when,
        total=Decimal(total),
        payment_method="Cash",
        cashier=cashier,
    )


def test_low_stock_boundary_is_strict() -> None:
    """Stock below the minimum is flagged, stock equal to it is not."""
    below = Product(id=1, price=Decimal("1"), stock=9, min_stock_level=10)
    equal = Product(id=2, price=Decimal("1"), stock=10, min_stock_level=10)

    assert is_low_stock(below) is True
    assert is_low_stock(equal) is False


def test_low_stock_uses_default_threshold_without_minimum() -> None:
    """Products without their own level use the default threshold."""
    product = Product(id=1, price=Decimal("1"), stock=9)

    assert is_low_stock(product) is True
    assert is_low_stock(product, default_threshold=5) is False


def test_low_stock_honours_product_threshold_over_default() -> None:
    """A product minimum overrides the default threshold."""
    product = Product(id=1, price=Decimal("1"), stock=15, min_stock_level=20)

    assert is_low_stock(product, default_threshold=10) is True


def test_sale_day_is_calendar_day_not_rolling_window() -> None:
    """A sale late yesterday is not part of today."""
    today = date(2024, 5, 2)
    late_yesterday = _sale(1, datetime(2024, 5, 1, 23, 59), "10")
    early_today = _sale(2, datetime(2024, 5, 2, 0, 1), "10")

    assert is_sale_on_day(late_yesterday, today) is False
    assert is_sale_on_day(early_today, today) is True


def test_aware_timestamps_compare_in_local_time() -> None:
    """Aware timestamps are converted to local time before comparing."""
    moment = datetime(2024, 5, 2, 12, 0, tzinfo=timezone.utc)
    sale = _sale(1, moment, "10")

    assert is_sale_on_day(sale, moment.astimezone().date()) is True


def test_filter_sales_for_day_by_cashier() -> None:
    """The cashier filter keeps only that cashier's sales."""
    today = date(2024, 5, 2)
    sales = [
        _sale(1, datetime(2024, 5, 2, 9), "10", cashier="Jane"),
        _sale(2, datetime(2024, 5, 2, 10), "20", cashier="Mike"),
        _sale(3, datetime(2024, 5, 1, 10), "30", cashier="Jane"),
    ]

    result = filter_sales_for_day(sales, today, cashier="Jane")

    assert [sale.id for sale in result] == [1]


def test_dashboard_summary_counts_today_and_low_stock() -> None:
    """The dashboard reports today's sales and low-stock products."""
    today = date(2024, 5, 2)
    snapshot = ShopSnapshot(
        sales=(
            _sale(1, datetime(2024, 5, 2, 9), "40"),
            _sale(2, datetime(2024, 5, 2, 18), "60"),
            _sale(3, datetime(2024, 5, 2, 9) - timedelta(days=1), "500"),
        ),
        products=(
            Product(id=1, price=Decimal("2"), stock=3),
            Product(id=2, price=Decimal("2"), stock=10),
            Product(id=3, price=Decimal("2"), stock=30, min_stock_level=50),
        ),
    )

    summary = compute_dashboard_summary(snapshot, today=today)

    assert summary.today_sales_count == 2
    assert summary.today_revenue == Decimal("100")
    assert summary.today_average_sale == Decimal("50")
    assert summary.low_stock_count == 2
    assert [product.id for product in summary.low_stock_products] == [1, 3]
    assert summary.total_products == 3


def test_dashboard_summary_without_sales_today() -> None:
    """No sales today gives a zero average instead of an error."""
    summary = compute_dashboard_summary(
        ShopSnapshot(),
        today=date(2024, 5, 2),
    )

    assert summary.today_sales_count == 0
    assert summary.today_revenue == 0
    assert summary.today_average_sale == 0
    assert summary.low_stock_products == []
