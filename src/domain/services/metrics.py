"""Composite financial metrics derived from category totals.

Every ratio and percentage goes through :func:`safe_ratio` or
:func:`safe_percentage`, which resolve a zero or negative denominator to
zero, and every derived figure is computed with overflow trapped off and
non-finite results mapped to zero. Results are therefore always finite,
whatever the input.
"""

from decimal import Decimal

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.models import (
    BalanceSheet,
    CategoryTotals,
    FinancialRatios,
    IncomeStatement,
    MonthlyAverages,
    PerformanceMetrics,
)
from src.utils.decimal_utils import finite_result

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@finite_result
def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide, returning zero when the denominator is not positive."""
    if denominator <= 0:
        return ZERO
    return numerator / denominator


@finite_result
def safe_percentage(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return ``numerator / denominator * 100`` or zero."""
    if denominator <= 0:
        return ZERO
    return (numerator / denominator) * HUNDRED


@finite_result
def gross_profit(totals: CategoryTotals) -> Decimal:
    """Revenue minus cost of goods sold."""
    return totals.revenue - totals.cost


@finite_result
def net_profit(totals: CategoryTotals) -> Decimal:
    """Gross profit minus operating expenses."""
    return gross_profit(totals) - totals.expenses


@finite_result
def operating_income(totals: CategoryTotals) -> Decimal:
    """Gross profit minus operating expenses.

    Identical to :func:`net_profit` while there are no taxes or interest to
    separate them.
    """
    return gross_profit(totals) - totals.expenses


@finite_result
def current_assets(totals: CategoryTotals) -> Decimal:
    """Asset value plus inventory value."""
    return totals.assets_value + totals.inventory_value


def current_liabilities(totals: CategoryTotals) -> Decimal:
    """Cumulative expenses, standing in for a liabilities ledger."""
    return totals.expenses


@finite_result
def asset_depreciation(totals: CategoryTotals) -> Decimal:
    """Purchase value lost since acquisition."""
    return totals.assets_purchase_value - totals.assets_value


@finite_result
def inventory_turnover(totals: CategoryTotals) -> Decimal:
    """Cost of goods sold divided by inventory value."""
    if totals.cost <= 0 or totals.inventory_value <= 0:
        return ZERO
    return totals.cost / totals.inventory_value


def build_income_statement(totals: CategoryTotals) -> IncomeStatement:
    """Assemble the income statement section."""
    profit = net_profit(totals)
    return IncomeStatement(
        revenue=totals.revenue,
        cost=totals.cost,
        gross_profit=gross_profit(totals),
        expenses=totals.expenses,
        net_profit=profit,
        profit_margin=safe_percentage(profit, totals.revenue),
        operating_income=operating_income(totals),
    )


def build_balance_sheet(totals: CategoryTotals) -> BalanceSheet:
    """Assemble the balance sheet section."""
    assets = current_assets(totals)
    liabilities = current_liabilities(totals)
    depreciation = asset_depreciation(totals)
    return BalanceSheet(
        assets_value=totals.assets_value,
        assets_purchase_value=totals.assets_purchase_value,
        inventory_value=totals.inventory_value,
        current_assets=assets,
        current_liabilities=liabilities,
        current_ratio=safe_ratio(assets, liabilities),
        depreciation=depreciation,
        depreciation_rate=safe_percentage(
            depreciation,
            totals.assets_purchase_value,
        ),
    )


def build_performance_metrics(totals: CategoryTotals) -> PerformanceMetrics:
    """Assemble the performance section."""
    return PerformanceMetrics(
        transaction_count=totals.sale_count,
        average_transaction_value=safe_ratio(
            totals.revenue,
            Decimal(totals.sale_count),
        ),
        inventory_turnover=inventory_turnover(totals),
        return_on_assets=safe_percentage(
            net_profit(totals),
            totals.assets_value,
        ),
        gross_profit_margin=safe_percentage(
            gross_profit(totals),
            totals.revenue,
        ),
        operating_margin=safe_percentage(
            operating_income(totals),
            totals.revenue,
        ),
    )


def build_financial_ratios(totals: CategoryTotals) -> FinancialRatios:
    """Assemble the ratios section."""
    assets = current_assets(totals)
    liabilities = current_liabilities(totals)
    return FinancialRatios(
        current_ratio=safe_ratio(assets, liabilities),
        quick_ratio=safe_ratio(
            assets - totals.inventory_value,
            liabilities,
        ),
        profit_margin=safe_percentage(net_profit(totals), totals.revenue),
        cogs_ratio=safe_percentage(totals.cost, totals.revenue),
        expense_ratio=safe_percentage(totals.expenses, totals.revenue),
        asset_turnover=safe_ratio(totals.revenue, totals.assets_value),
    )


def build_monthly_averages(totals: CategoryTotals) -> MonthlyAverages:
    """Spread revenue and net profit over a year."""
    months = Decimal(MONTHS_PER_YEAR)
    return MonthlyAverages(
        monthly_revenue=totals.revenue / months,
        monthly_profit=net_profit(totals) / months,
    )


__all__ = [
    "safe_ratio",
    "safe_percentage",
    "gross_profit",
    "net_profit",
    "operating_income",
    "current_assets",
    "current_liabilities",
    "asset_depreciation",
    "inventory_turnover",
    "build_income_statement",
    "build_balance_sheet",
    "build_performance_metrics",
    "build_financial_ratios",
    "build_monthly_averages",
]
