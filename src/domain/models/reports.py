"""Domain models for derived financial reports."""

from dataclasses import dataclass
from decimal import Decimal

from .records import Product


@dataclass(frozen=True)
class CategoryTotals:
    """Raw totals reduced from each record collection."""

    revenue: Decimal
    cost: Decimal
    expenses: Decimal
    assets_value: Decimal
    assets_purchase_value: Decimal
    inventory_value: Decimal
    sale_count: int


@dataclass(frozen=True)
class IncomeStatement:
    """Revenue, costs, and profitability.

    Attributes:
        revenue: Sum of sale totals.
        cost: Sum of purchase totals (cost of goods sold).
        gross_profit: Revenue minus cost.
        expenses: Sum of expense amounts.
        net_profit: Gross profit minus expenses.
        profit_margin: Net profit as a percentage of revenue.
        operating_income: Gross profit minus expenses. Shares the net profit
            formula under this model but is reported as its own line.
    """

    revenue: Decimal
    cost: Decimal
    gross_profit: Decimal
    expenses: Decimal
    net_profit: Decimal
    profit_margin: Decimal
    operating_income: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Asset, inventory, and liquidity figures.

    ``current_liabilities`` is approximated by total expenses; there is no
    liabilities ledger behind it.
    """

    assets_value: Decimal
    assets_purchase_value: Decimal
    inventory_value: Decimal
    current_assets: Decimal
    current_liabilities: Decimal
    current_ratio: Decimal
    depreciation: Decimal
    depreciation_rate: Decimal


@dataclass(frozen=True)
class PerformanceMetrics:
    """Operating performance indicators."""

    transaction_count: int
    average_transaction_value: Decimal
    inventory_turnover: Decimal
    return_on_assets: Decimal
    gross_profit_margin: Decimal
    operating_margin: Decimal


@dataclass(frozen=True)
class FinancialRatios:
    """Liquidity, profitability, and efficiency ratios."""

    current_ratio: Decimal
    quick_ratio: Decimal
    profit_margin: Decimal
    cogs_ratio: Decimal
    expense_ratio: Decimal
    asset_turnover: Decimal


@dataclass(frozen=True)
class MonthlyAverages:
    """Revenue and profit spread evenly over twelve months."""

    monthly_revenue: Decimal
    monthly_profit: Decimal


@dataclass(frozen=True)
class FinancialReport:
    """Complete report grouped into named sections."""

    income: IncomeStatement
    balance: BalanceSheet
    performance: PerformanceMetrics
    ratios: FinancialRatios
    monthly: MonthlyAverages
    currency_code: str


@dataclass(frozen=True)
class DashboardSummary:
    """Today-scoped sales figures and low-stock alerts."""

    today_sales_count: int
    today_revenue: Decimal
    today_average_sale: Decimal
    low_stock_count: int
    low_stock_products: list[Product]
    total_products: int


@dataclass(frozen=True)
class ExpenseCategoryAmount:
    """Expense total for one category."""

    category: str
    amount: Decimal
    share: Decimal


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Expenses grouped by category."""

    total: Decimal
    categories: list[ExpenseCategoryAmount]

    @property
    def top_category(self) -> ExpenseCategoryAmount | None:
        """Return the category with the largest total, if any."""
        return self.categories[0] if self.categories else None


@dataclass(frozen=True)
class StockSummary:
    """Inventory counts and valuation."""

    product_count: int
    low_stock_count: int
    out_of_stock_count: int
    inventory_value: Decimal


@dataclass(frozen=True)
class PaymentMethodTotal:
    """Sales total and count for one payment method."""

    payment_method: str
    total: Decimal
    count: int


@dataclass(frozen=True)
class SalesActivity:
    """Sales split by payment method and purchasing volume."""

    payment_methods: list[PaymentMethodTotal]
    purchase_count: int
    purchase_quantity: int
    purchase_total: Decimal


__all__ = [
    "CategoryTotals",
    "IncomeStatement",
    "BalanceSheet",
    "PerformanceMetrics",
    "FinancialRatios",
    "MonthlyAverages",
    "FinancialReport",
    "DashboardSummary",
    "ExpenseCategoryAmount",
    "ExpenseBreakdown",
    "StockSummary",
    "PaymentMethodTotal",
    "SalesActivity",
]
