"""Stock level policies."""

from src.domain.constants import DEFAULT_LOW_STOCK_THRESHOLD
from src.domain.models import Product


def resolve_stock_threshold(
    product: Product,
    default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> int:
    """Return the low-stock threshold that applies to a product.

    A missing or zero ``min_stock_level`` falls back to the default.
    """
    return product.min_stock_level or default_threshold


def is_low_stock(
    product: Product,
    default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> bool:
    """Return True when stock is strictly below the product threshold.

    Args:
        product: Product to check.
        default_threshold: Threshold used when the product has none.

    Returns:
        bool: True when ``stock < threshold``. Stock equal to the threshold
        is not low.
    """
    return product.stock < resolve_stock_threshold(product, default_threshold)


def is_out_of_stock(product: Product) -> bool:
    """Return True when no units are left."""
    return product.stock == 0


__all__ = ["resolve_stock_threshold", "is_low_stock", "is_out_of_stock"]
