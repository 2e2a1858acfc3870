"""Use case to group expenses by category."""

from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.domain.models import ExpenseBreakdown
from src.domain.services.breakdowns import compute_expense_breakdown
from src.infrastructure.logging.logger import get_app_logger


class GetExpenseBreakdownUseCase:
    """Compute expense totals per category."""

    def __init__(
        self,
        records_repository: ShopRecordsRepositoryPort,
        logger=None,
    ) -> None:
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> ExpenseBreakdown:
        """Return expenses grouped by category, largest first."""
        snapshot = self._records_repository.fetch_snapshot()
        breakdown = compute_expense_breakdown(snapshot.expenses)
        self._logger.info(
            f"Expense breakdown computed: {len(breakdown.categories)} "
            f"categories, total={breakdown.total}"
        )
        return breakdown


__all__ = ["GetExpenseBreakdownUseCase", "ExpenseBreakdown"]
