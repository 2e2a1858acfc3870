"""Domain services for the financial report."""

from logging import Logger

from src.domain.models import FinancialReport, ShopSnapshot
from src.domain.services.metrics import (
    build_balance_sheet,
    build_financial_ratios,
    build_income_statement,
    build_monthly_averages,
    build_performance_metrics,
)
from src.domain.services.totals import compute_category_totals
from src.domain.services.validation import validate_snapshot


def compute_financial_report(
    snapshot: ShopSnapshot,
    *,
    currency_code: str,
    logger: Logger,
) -> FinancialReport:
    """Compute the full financial report for a snapshot.

    The computation is pure: the snapshot is not modified, nothing is
    cached, and the same snapshot always yields the same report.

    Args:
        snapshot: Sales, purchases, expenses, assets, and products.
        currency_code: Currency the record amounts are expressed in.
        logger: Logger used for data-quality warnings.

    Returns:
        FinancialReport: Income, balance, performance, and ratio sections.
    """
    validate_snapshot(snapshot, logger)
    totals = compute_category_totals(snapshot)
    return FinancialReport(
        income=build_income_statement(totals),
        balance=build_balance_sheet(totals),
        performance=build_performance_metrics(totals),
        ratios=build_financial_ratios(totals),
        monthly=build_monthly_averages(totals),
        currency_code=currency_code,
    )


__all__ = ["compute_financial_report"]
