"""Tests for the GetFinancialReportUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_financial_report import (
    GetFinancialReportUseCase,
)
from src.domain.models import ExpenseRecord, SaleRecord, ShopSnapshot


def _build_repository(snapshot: ShopSnapshot) -> MagicMock:
    repository = MagicMock()
    repository.fetch_snapshot.return_value = snapshot
    return repository


def test_execute_returns_report_for_snapshot() -> None:
    """Use case should compute the report from the fetched snapshot."""
    when = datetime(2024, 5, 2, 9, 30)
    snapshot = ShopSnapshot(
        sales=(
            SaleRecord(1, when, Decimal("200.00"), "Cash", "Jane"),
        ),
        expenses=(
            ExpenseRecord(1, when, "Rent", Decimal("50.00")),
        ),
    )
    repository = _build_repository(snapshot)
    logger = MagicMock()

    use_case = GetFinancialReportUseCase(
        repository,
        logger=logger,
        currency_code="EUR",
    )

    report = use_case.execute()

    repository.fetch_snapshot.assert_called_once_with()
    assert report.income.revenue == Decimal("200.00")
    assert report.income.net_profit == Decimal("150.00")
    assert report.income.profit_margin == Decimal("75")
    assert report.currency_code == "EUR"
    logger.info.assert_called_once()
    assert "revenue=200.00" in logger.info.call_args[0][0]


def test_execute_recomputes_on_every_call() -> None:
    """Each execution fetches a fresh snapshot."""
    when = datetime(2024, 5, 2, 9, 30)
    repository = MagicMock()
    repository.fetch_snapshot.side_effect = [
        ShopSnapshot(),
        ShopSnapshot(
            sales=(SaleRecord(1, when, Decimal("10"), "Card", "Jane"),),
        ),
    ]

    use_case = GetFinancialReportUseCase(repository, logger=MagicMock())

    first = use_case.execute()
    second = use_case.execute()

    assert first.income.revenue == 0
    assert second.income.revenue == Decimal("10")
    assert repository.fetch_snapshot.call_count == 2


def test_default_logger_is_app_logger(monkeypatch) -> None:
    """Without a logger the use case uses the application logger."""
    from src.application.use_cases import get_financial_report

    fake_logger = MagicMock()
    monkeypatch.setattr(
        get_financial_report,
        "get_app_logger",
        lambda: fake_logger,
    )

    use_case = GetFinancialReportUseCase(_build_repository(ShopSnapshot()))
    use_case.execute()

    fake_logger.info.assert_called_once()
