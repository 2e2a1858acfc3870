"""Use case to summarize inventory levels."""

from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.domain.constants import DEFAULT_LOW_STOCK_THRESHOLD
from src.domain.models import StockSummary
from src.domain.services.breakdowns import compute_stock_summary
from src.infrastructure.logging.logger import get_app_logger


class GetStockSummaryUseCase:
    """Count low and empty stock and value the inventory."""

    def __init__(
        self,
        records_repository: ShopRecordsRepositoryPort,
        logger=None,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._low_stock_threshold = low_stock_threshold

    def execute(self) -> StockSummary:
        snapshot = self._records_repository.fetch_snapshot()
        summary = compute_stock_summary(
            snapshot.products,
            self._low_stock_threshold,
        )
        if summary.out_of_stock_count:
            self._logger.warning(
                f"{summary.out_of_stock_count} products are out of stock"
            )
        self._logger.info(
            f"Stock summary computed: products={summary.product_count}, "
            f"low_stock={summary.low_stock_count}, "
            f"value={summary.inventory_value}"
        )
        return summary


__all__ = ["GetStockSummaryUseCase", "StockSummary"]
