"""Use case to compute the financial report from shop records."""

from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.domain.models import FinancialReport
from src.domain.services.finance import compute_financial_report
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialReportUseCase:
    """Compute income, balance, performance, and ratio figures."""

    def __init__(
        self,
        records_repository: ShopRecordsRepositoryPort,
        logger=None,
        currency_code: str = "USD",
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing record snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency the record amounts are expressed in.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(self) -> FinancialReport:
        """Return the financial report for the current records.

        Returns:
            FinancialReport: Freshly computed report.
        """
        snapshot = self._records_repository.fetch_snapshot()
        report = compute_financial_report(
            snapshot,
            currency_code=self._currency_code,
            logger=self._logger,
        )
        self._logger.info(
            f"Financial report computed: revenue={report.income.revenue}, "
            f"net_profit={report.income.net_profit}, "
            f"currency={self._currency_code}"
        )
        return report


__all__ = ["GetFinancialReportUseCase", "FinancialReport"]
