"""Domain services for category and stock breakdowns."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import DEFAULT_LOW_STOCK_THRESHOLD
from src.domain.models import (
    ExpenseBreakdown,
    ExpenseCategoryAmount,
    ExpenseRecord,
    PaymentMethodTotal,
    Product,
    SaleRecord,
    SalesActivity,
    ShopSnapshot,
    StockSummary,
)
from src.domain.policies import is_low_stock, is_out_of_stock
from src.domain.services.metrics import safe_percentage
from src.domain.services.totals import (
    sum_cost,
    sum_inventory_value,
    sum_purchase_quantity,
)
from src.utils.decimal_utils import coerce_decimal, sum_decimals


def compute_expense_breakdown(
    expenses: Iterable[ExpenseRecord],
) -> ExpenseBreakdown:
    """Group expenses by category.

    Args:
        expenses: Expenses to group.

    Returns:
        ExpenseBreakdown: Categories sorted by amount, largest first, with
        each category's share of the total.
    """
    amounts: dict[str, list[Decimal]] = {}
    for expense in expenses:
        amounts.setdefault(expense.category, []).append(
            coerce_decimal(expense.amount)
        )
    totals = {
        category: sum_decimals(values) for category, values in amounts.items()
    }
    total = sum_decimals(totals.values())
    categories = [
        ExpenseCategoryAmount(
            category=category,
            amount=amount,
            share=safe_percentage(amount, total),
        )
        for category, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], item[0]),
        )
    ]
    return ExpenseBreakdown(total=total, categories=categories)


def compute_stock_summary(
    products: Iterable[Product],
    default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> StockSummary:
    """Count low and empty stock and value the inventory."""
    items = list(products)
    return StockSummary(
        product_count=len(items),
        low_stock_count=sum(
            1 for product in items if is_low_stock(product, default_threshold)
        ),
        out_of_stock_count=sum(
            1 for product in items if is_out_of_stock(product)
        ),
        inventory_value=sum_inventory_value(items),
    )


def compute_payment_method_totals(
    sales: Iterable[SaleRecord],
) -> list[PaymentMethodTotal]:
    """Return sales totals and counts per payment method."""
    amounts: dict[str, list[Decimal]] = {}
    for sale in sales:
        amounts.setdefault(sale.payment_method, []).append(
            coerce_decimal(sale.total)
        )
    return [
        PaymentMethodTotal(
            payment_method=method,
            total=sum_decimals(amounts[method]),
            count=len(amounts[method]),
        )
        for method in sorted(amounts)
    ]


def compute_sales_activity(snapshot: ShopSnapshot) -> SalesActivity:
    """Summarize how sales were paid and how much stock was bought.

    Args:
        snapshot: Record collections to summarize.

    Returns:
        SalesActivity: Per payment method totals plus purchase count,
        units, and cost.
    """
    return SalesActivity(
        payment_methods=compute_payment_method_totals(snapshot.sales),
        purchase_count=len(snapshot.purchases),
        purchase_quantity=sum_purchase_quantity(snapshot.purchases),
        purchase_total=sum_cost(snapshot.purchases),
    )


__all__ = [
    "compute_expense_breakdown",
    "compute_stock_summary",
    "compute_payment_method_totals",
    "compute_sales_activity",
]
