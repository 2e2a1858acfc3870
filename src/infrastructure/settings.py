"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_LOW_STOCK_THRESHOLD
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("json", "sql", "memory")


@dataclass(frozen=True)
class ShopSettings:
    """Settings for selecting the record provider and report defaults.

    Attributes:
        backend: Record provider identifier (json, sql, or memory).
        data_file: Optional path to a JSON snapshot of the records.
        currency_code: Currency the record amounts are expressed in.
        low_stock_threshold: Threshold for products without their own.
    """

    backend: str = "json"
    data_file: Optional[Path] = None
    currency_code: str = "USD"
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD

    @classmethod
    def from_env(cls) -> "ShopSettings":
        """Build settings from environment variables.

        Returns:
            ShopSettings: Settings sourced from the environment and .env.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("SHOP_BACKEND", "json").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unknown SHOP_BACKEND '{backend}', falling back to json."
            )
            backend = "json"
        raw_data_file = os.getenv("SHOP_DATA_FILE")
        if raw_data_file:
            data_file = cls._normalize_path(raw_data_file, logger=logger)
        else:
            data_file = cls._default_data_file(logger=logger)
        currency_code = (
            os.getenv("SHOP_CURRENCY", "USD").strip().upper() or "USD"
        )
        threshold = cls._parse_threshold(
            os.getenv("LOW_STOCK_THRESHOLD"),
            logger=logger,
        )
        return cls(
            backend=backend,
            data_file=data_file,
            currency_code=currency_code,
            low_stock_threshold=threshold,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Resolve the data file path, warning when it is missing."""
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Shop data file does not exist at {path}")
        return path

    @staticmethod
    def _default_data_file(logger) -> Path | None:
        """Return a default data file path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single JSON file is in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set SHOP_DATA_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_threshold(raw_value: str | None, logger) -> int:
        if not raw_value:
            return DEFAULT_LOW_STOCK_THRESHOLD
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid LOW_STOCK_THRESHOLD '{raw_value}', "
                f"using {DEFAULT_LOW_STOCK_THRESHOLD}."
            )
            return DEFAULT_LOW_STOCK_THRESHOLD
        if value <= 0:
            logger.warning(
                f"LOW_STOCK_THRESHOLD must be positive, "
                f"using {DEFAULT_LOW_STOCK_THRESHOLD}."
            )
            return DEFAULT_LOW_STOCK_THRESHOLD
        return value


__all__ = ["ShopSettings", "SUPPORTED_BACKENDS"]
