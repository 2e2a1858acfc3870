"""Domain models package."""

from .records import (
    AssetRecord,
    ExpenseRecord,
    Product,
    PurchaseRecord,
    SaleItem,
    SaleRecord,
    ShopSnapshot,
)
from .reports import (
    BalanceSheet,
    CategoryTotals,
    DashboardSummary,
    ExpenseBreakdown,
    ExpenseCategoryAmount,
    FinancialRatios,
    FinancialReport,
    IncomeStatement,
    MonthlyAverages,
    PaymentMethodTotal,
    PerformanceMetrics,
    SalesActivity,
    StockSummary,
)

__all__ = [
    "AssetRecord",
    "ExpenseRecord",
    "Product",
    "PurchaseRecord",
    "SaleItem",
    "SaleRecord",
    "ShopSnapshot",
    "BalanceSheet",
    "CategoryTotals",
    "DashboardSummary",
    "ExpenseBreakdown",
    "ExpenseCategoryAmount",
    "FinancialRatios",
    "FinancialReport",
    "IncomeStatement",
    "MonthlyAverages",
    "PaymentMethodTotal",
    "PerformanceMetrics",
    "SalesActivity",
    "StockSummary",
]
