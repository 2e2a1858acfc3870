"""Use case to compute today's dashboard figures."""

from datetime import date

from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.domain.constants import DEFAULT_LOW_STOCK_THRESHOLD
from src.domain.models import DashboardSummary
from src.domain.services.dashboard import compute_dashboard_summary
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Compute today's sales and low-stock alerts."""

    def __init__(
        self,
        records_repository: ShopRecordsRepositoryPort,
        logger=None,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing record snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            low_stock_threshold: Threshold for products without their own.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._low_stock_threshold = low_stock_threshold

    def execute(
        self,
        today: date | None = None,
        cashier: str | None = None,
    ) -> DashboardSummary:
        """Return the dashboard summary.

        Args:
            today: Calendar day treated as today. Defaults to the local date.
            cashier: Optional cashier name to restrict sales to.

        Returns:
            DashboardSummary: Today's sales and low-stock figures.
        """
        day = today or date.today()
        snapshot = self._records_repository.fetch_snapshot()
        summary = compute_dashboard_summary(
            snapshot,
            today=day,
            cashier=cashier,
            low_stock_threshold=self._low_stock_threshold,
        )
        self._logger.info(
            f"Dashboard computed for {day.isoformat()}: "
            f"sales={summary.today_sales_count}, "
            f"revenue={summary.today_revenue}, "
            f"low_stock={summary.low_stock_count}"
        )
        return summary


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]
