"""Domain package for shop reporting rules and core models."""

from .constants import DEFAULT_LOW_STOCK_THRESHOLD
from .models import (
    AssetRecord,
    ExpenseRecord,
    FinancialReport,
    Product,
    PurchaseRecord,
    SaleRecord,
    ShopSnapshot,
)
from .policies import is_low_stock, is_sale_on_day
from .services import (
    compute_dashboard_summary,
    compute_expense_breakdown,
    compute_financial_report,
    compute_stock_summary,
)

__all__ = [
    "DEFAULT_LOW_STOCK_THRESHOLD",
    "AssetRecord",
    "ExpenseRecord",
    "FinancialReport",
    "Product",
    "PurchaseRecord",
    "SaleRecord",
    "ShopSnapshot",
    "is_low_stock",
    "is_sale_on_day",
    "compute_dashboard_summary",
    "compute_expense_breakdown",
    "compute_financial_report",
    "compute_stock_summary",
]
