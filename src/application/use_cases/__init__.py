"""Application use cases package."""

from .get_dashboard_summary import (
    DashboardSummary,
    GetDashboardSummaryUseCase,
)
from .get_expense_breakdown import (
    ExpenseBreakdown,
    GetExpenseBreakdownUseCase,
)
from .get_financial_report import (
    FinancialReport,
    GetFinancialReportUseCase,
)
from .get_sales_activity import GetSalesActivityUseCase, SalesActivity
from .get_stock_summary import GetStockSummaryUseCase, StockSummary

__all__ = [
    "DashboardSummary",
    "GetDashboardSummaryUseCase",
    "ExpenseBreakdown",
    "GetExpenseBreakdownUseCase",
    "FinancialReport",
    "GetFinancialReportUseCase",
    "GetSalesActivityUseCase",
    "SalesActivity",
    "GetStockSummaryUseCase",
    "StockSummary",
]
