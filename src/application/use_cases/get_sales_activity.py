"""Use case to summarize payment methods and purchasing volume."""

from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.domain.models import SalesActivity
from src.domain.services.breakdowns import compute_sales_activity
from src.infrastructure.logging.logger import get_app_logger


class GetSalesActivityUseCase:
    """Compute sales per payment method and purchase totals."""

    def __init__(
        self,
        records_repository: ShopRecordsRepositoryPort,
        logger=None,
    ) -> None:
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> SalesActivity:
        snapshot = self._records_repository.fetch_snapshot()
        activity = compute_sales_activity(snapshot)
        self._logger.info(
            f"Sales activity computed: "
            f"{len(activity.payment_methods)} payment methods, "
            f"{activity.purchase_count} purchases, "
            f"units={activity.purchase_quantity}"
        )
        return activity


__all__ = ["GetSalesActivityUseCase", "SalesActivity"]
