"""Streamlit reports page entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.use_cases.get_dashboard_summary import (
    DashboardSummary,
    GetDashboardSummaryUseCase,
)
from src.application.use_cases.get_expense_breakdown import (
    ExpenseBreakdown,
    GetExpenseBreakdownUseCase,
)
from src.application.use_cases.get_financial_report import (
    FinancialReport,
    GetFinancialReportUseCase,
)
from src.application.use_cases.get_sales_activity import (
    GetSalesActivityUseCase,
    SalesActivity,
)
from src.infrastructure.container import build_records_repository
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.memory_store import InMemoryShopStore
from src.infrastructure.settings import ShopSettings

SECTIONS = ("Income", "Balance", "Performance", "Ratios")

ReportBundle = tuple[
    FinancialReport,
    DashboardSummary,
    ExpenseBreakdown,
    SalesActivity,
]


def _fetch_reports(today: date) -> ReportBundle:
    """Fetch the report, dashboard, expense breakdown, and sales activity."""
    settings = ShopSettings.from_env()
    repository = build_records_repository(settings)
    store = InMemoryShopStore(repository.fetch_snapshot())
    report = GetFinancialReportUseCase(
        store,
        currency_code=settings.currency_code,
    ).execute()
    dashboard = GetDashboardSummaryUseCase(
        store,
        low_stock_threshold=settings.low_stock_threshold,
    ).execute(today=today)
    breakdown = GetExpenseBreakdownUseCase(store).execute()
    activity = GetSalesActivityUseCase(store).execute()
    return report, dashboard, breakdown, activity


@st.cache_data(show_spinner=False, ttl=60)
def _load_reports(today: date) -> ReportBundle:
    """Cached wrapper around _fetch_reports for Streamlit sessions."""
    return _fetch_reports(today)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    if currency_code == "USD":
        return f"${value:,.2f}"
    return f"{value:,.2f} {currency_code}"


def _format_percent(value: Decimal) -> str:
    return f"{value:.2f}%"


def _format_ratio(value: Decimal) -> str:
    return f"{value:.2f}"


def _section_metrics(
    report: FinancialReport,
    section: str,
) -> list[tuple[str, str]]:
    """Return (label, formatted value) pairs for a report section."""
    money = report.currency_code
    if section == "Income":
        income = report.income
        return [
            ("Total Revenue", _format_currency(income.revenue, money)),
            ("Cost of Goods Sold", _format_currency(income.cost, money)),
            ("Total Expenses", _format_currency(income.expenses, money)),
            ("Gross Profit", _format_currency(income.gross_profit, money)),
            ("Net Profit", _format_currency(income.net_profit, money)),
            ("Profit Margin", _format_percent(income.profit_margin)),
        ]
    if section == "Balance":
        balance = report.balance
        return [
            ("Assets Value", _format_currency(balance.assets_value, money)),
            (
                "Inventory Value",
                _format_currency(balance.inventory_value, money),
            ),
            (
                "Current Assets",
                _format_currency(balance.current_assets, money),
            ),
            ("Current Ratio", _format_ratio(balance.current_ratio)),
            (
                "Asset Depreciation",
                _format_currency(balance.depreciation, money),
            ),
            ("Depreciation Rate", _format_percent(balance.depreciation_rate)),
        ]
    if section == "Performance":
        performance = report.performance
        return [
            ("Transactions", str(performance.transaction_count)),
            (
                "Average Transaction",
                _format_currency(
                    performance.average_transaction_value,
                    money,
                ),
            ),
            (
                "Inventory Turnover",
                _format_ratio(performance.inventory_turnover),
            ),
            ("Return on Assets", _format_percent(performance.return_on_assets)),
            (
                "Gross Profit Margin",
                _format_percent(performance.gross_profit_margin),
            ),
            (
                "Operating Margin",
                _format_percent(performance.operating_margin),
            ),
        ]
    ratios = report.ratios
    return [
        ("Current Ratio", _format_ratio(ratios.current_ratio)),
        ("Quick Ratio", _format_ratio(ratios.quick_ratio)),
        ("Net Profit Margin", _format_percent(ratios.profit_margin)),
        ("COGS Ratio", _format_percent(ratios.cogs_ratio)),
        ("Expense Ratio", _format_percent(ratios.expense_ratio)),
        ("Asset Turnover", _format_ratio(ratios.asset_turnover)),
    ]


def _prepare_donut_chart_data(
    breakdown: ExpenseBreakdown,
    currency_code: str,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Expenses grouped by category, largest first.
        currency_code: Currency used for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        list: Altair-ready chart rows.
    """
    top_items = breakdown.categories[:max_categories]
    other_items = breakdown.categories[max_categories:]
    rows = [(item.category, item.amount, item.share) for item in top_items]
    if other_items:
        rows.append(
            (
                "Other",
                sum((item.amount for item in other_items), start=Decimal("0")),
                sum((item.share for item in other_items), start=Decimal("0")),
            )
        )
    return [
        {
            "category": category,
            "amount": float(amount),
            "amount_label": _format_currency(amount, currency_code),
            "share_label": f"{share:.1f}%",
        }
        for category, amount, share in rows
    ]


def _render_expense_chart(
    breakdown: ExpenseBreakdown,
    currency_code: str,
    chart_size: int = 320,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of expenses by category."""
    st.subheader("Expenses by Category")
    if not breakdown.categories:
        st.info("No expenses recorded yet.")
        return
    data = _prepare_donut_chart_data(breakdown, currency_code)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                range=list(
                    palette
                    or [
                        "#1b9aaa",
                        "#2e7d32",
                        "#f4a261",
                        "#e76f51",
                        "#457b9d",
                        "#f6c453",
                        "#6c8ead",
                    ]
                )
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _render_dashboard(summary: DashboardSummary, currency_code: str) -> None:
    """Render today's figures and low-stock alerts."""
    sales_col, revenue_col, average_col, stock_col = st.columns(4)
    sales_col.metric("Today's Sales", str(summary.today_sales_count))
    revenue_col.metric(
        "Today's Revenue",
        _format_currency(summary.today_revenue, currency_code),
    )
    average_col.metric(
        "Average Sale",
        _format_currency(summary.today_average_sale, currency_code),
    )
    stock_col.metric("Low Stock", str(summary.low_stock_count))
    if summary.low_stock_products:
        st.warning(
            f"{summary.low_stock_count} product"
            f"{'s' if summary.low_stock_count > 1 else ''} running low on stock"
        )


def _render_sales_activity(
    activity: SalesActivity,
    currency_code: str,
) -> None:
    """Render sales per payment method and the purchasing summary."""
    st.subheader("Sales by Payment Method")
    if not activity.payment_methods:
        st.info("No sales recorded yet.")
    else:
        columns = st.columns(len(activity.payment_methods))
        for column, item in zip(columns, activity.payment_methods):
            column.metric(
                f"{item.payment_method} ({item.count})",
                _format_currency(item.total, currency_code),
            )
    st.caption(
        f"Purchases: {activity.purchase_count} orders, "
        f"{activity.purchase_quantity} units, "
        f"{_format_currency(activity.purchase_total, currency_code)}"
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Shop Reports", layout="wide")
    st.title("Shop Reports")

    section = st.sidebar.selectbox("Section", list(SECTIONS))
    get_usage_logger().info(f"Reports section viewed: {section}")

    try:
        report, dashboard, breakdown, activity = _load_reports(date.today())
    except (RuntimeError, ValueError) as exc:
        st.error(f"Unable to load shop records: {exc}")
        return

    _render_dashboard(dashboard, report.currency_code)
    st.subheader(section)
    metrics = _section_metrics(report, section)
    columns = st.columns(3)
    for index, (label, value) in enumerate(metrics):
        columns[index % 3].metric(label, value)
    st.caption(
        f"Monthly revenue: "
        f"{_format_currency(report.monthly.monthly_revenue, report.currency_code)}"
        f" | Monthly profit: "
        f"{_format_currency(report.monthly.monthly_profit, report.currency_code)}"
    )
    _render_expense_chart(breakdown, report.currency_code)
    _render_sales_activity(activity, report.currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
