"""CLI adapter printing the shop financial report.

The record provider is selected by ``SHOP_BACKEND``. ``REPORT_TODAY``
(YYYY-MM-DD) overrides the day used by the dashboard section and
``REPORT_CASHIER`` restricts it to one cashier's sales.
"""

from datetime import date
import os
import sys

from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.application.use_cases.get_expense_breakdown import (
    GetExpenseBreakdownUseCase,
)
from src.application.use_cases.get_financial_report import (
    GetFinancialReportUseCase,
)
from src.application.use_cases.get_sales_activity import (
    GetSalesActivityUseCase,
)
from src.application.use_cases.get_stock_summary import (
    GetStockSummaryUseCase,
)
from src.infrastructure.container import build_records_repository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_store import InMemoryShopStore
from src.infrastructure.settings import ShopSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _print_section(title: str, rows: list[tuple[str, object]]) -> None:
    print(title)
    for label, value in rows:
        if isinstance(value, int):
            print(f"  {label}: {value}")
        else:
            print(f"  {label}: {value:,.2f}")


def main() -> int:
    """Print the report sections for the configured records."""
    logger = get_app_logger()
    settings = ShopSettings.from_env()
    try:
        repository = build_records_repository(settings)
        # One read per run so every section describes the same records.
        store = InMemoryShopStore(repository.fetch_snapshot())
        report = GetFinancialReportUseCase(
            store,
            logger=logger,
            currency_code=settings.currency_code,
        ).execute()
        dashboard = GetDashboardSummaryUseCase(
            store,
            logger=logger,
            low_stock_threshold=settings.low_stock_threshold,
        ).execute(
            today=_parse_date(os.getenv("REPORT_TODAY"), logger),
            cashier=os.getenv("REPORT_CASHIER") or None,
        )
        expenses = GetExpenseBreakdownUseCase(store, logger=logger).execute()
        stock = GetStockSummaryUseCase(
            store,
            logger=logger,
            low_stock_threshold=settings.low_stock_threshold,
        ).execute()
        activity = GetSalesActivityUseCase(store, logger=logger).execute()
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return 1

    print(f"Financial report ({report.currency_code})")
    _print_section(
        "Income Statement",
        [
            ("Revenue", report.income.revenue),
            ("Cost of goods sold", report.income.cost),
            ("Gross profit", report.income.gross_profit),
            ("Expenses", report.income.expenses),
            ("Net profit", report.income.net_profit),
            ("Profit margin %", report.income.profit_margin),
        ],
    )
    _print_section(
        "Balance Sheet",
        [
            ("Assets value", report.balance.assets_value),
            ("Inventory value", report.balance.inventory_value),
            ("Current assets", report.balance.current_assets),
            ("Current ratio", report.balance.current_ratio),
            ("Depreciation", report.balance.depreciation),
            ("Depreciation rate %", report.balance.depreciation_rate),
        ],
    )
    _print_section(
        "Performance",
        [
            ("Transactions", report.performance.transaction_count),
            (
                "Average transaction",
                report.performance.average_transaction_value,
            ),
            ("Inventory turnover", report.performance.inventory_turnover),
            ("Return on assets %", report.performance.return_on_assets),
            (
                "Gross profit margin %",
                report.performance.gross_profit_margin,
            ),
            ("Operating margin %", report.performance.operating_margin),
        ],
    )
    _print_section(
        "Ratios",
        [
            ("Current ratio", report.ratios.current_ratio),
            ("Quick ratio", report.ratios.quick_ratio),
            ("Profit margin %", report.ratios.profit_margin),
            ("COGS ratio %", report.ratios.cogs_ratio),
            ("Expense ratio %", report.ratios.expense_ratio),
            ("Asset turnover", report.ratios.asset_turnover),
        ],
    )
    _print_section(
        "Today",
        [
            ("Sales", dashboard.today_sales_count),
            ("Revenue", dashboard.today_revenue),
            ("Average sale", dashboard.today_average_sale),
            ("Low stock products", dashboard.low_stock_count),
        ],
    )
    _print_section(
        "Stock",
        [
            ("Products", stock.product_count),
            ("Low stock", stock.low_stock_count),
            ("Out of stock", stock.out_of_stock_count),
            ("Inventory value", stock.inventory_value),
        ],
    )
    _print_section(
        "Sales by payment method",
        [
            (f"{item.payment_method} ({item.count})", item.total)
            for item in activity.payment_methods
        ],
    )
    _print_section(
        "Purchases",
        [
            ("Orders", activity.purchase_count),
            ("Units", activity.purchase_quantity),
            ("Cost", activity.purchase_total),
        ],
    )
    if expenses.top_category is not None:
        print(
            f"Top expense category: {expenses.top_category.category} "
            f"({expenses.top_category.share:.1f}%)"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
