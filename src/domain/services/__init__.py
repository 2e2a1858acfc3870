"""Domain services package."""

from .breakdowns import (
    compute_expense_breakdown,
    compute_payment_method_totals,
    compute_sales_activity,
    compute_stock_summary,
)
from .dashboard import (
    compute_dashboard_summary,
    filter_sales_for_day,
    find_low_stock_products,
)
from .finance import compute_financial_report
from .metrics import safe_percentage, safe_ratio
from .totals import compute_category_totals
from .validation import validate_snapshot

__all__ = [
    "compute_category_totals",
    "compute_dashboard_summary",
    "compute_expense_breakdown",
    "compute_financial_report",
    "compute_payment_method_totals",
    "compute_sales_activity",
    "compute_stock_summary",
    "filter_sales_for_day",
    "find_low_stock_products",
    "safe_percentage",
    "safe_ratio",
    "validate_snapshot",
]
