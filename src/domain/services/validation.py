"""Domain validation helpers.

Records are trusted as supplied; these checks only warn about values that
break the usual conventions so they can be traced in the logs.
"""

from logging import Logger

from src.domain.constants import ASSET_CONDITIONS, PAYMENT_METHODS
from src.domain.models import ShopSnapshot
from src.utils.decimal_utils import coerce_decimal, lenient_context


def validate_snapshot(snapshot: ShopSnapshot, logger: Logger) -> int:
    """Warn about records that violate expected conventions.

    Args:
        snapshot: Record collections to inspect.
        logger: Logger used for warnings.

    Returns:
        int: Number of warnings emitted.
    """
    warnings = 0
    for sale in snapshot.sales:
        if coerce_decimal(sale.total) < 0:
            logger.warning(
                f"Sale total is negative for sale={sale.id}: {sale.total}"
            )
            warnings += 1
        if sale.payment_method not in PAYMENT_METHODS:
            logger.warning(
                f"Unknown payment method for sale={sale.id}: "
                f"{sale.payment_method!r}"
            )
            warnings += 1
    for purchase in snapshot.purchases:
        with lenient_context():
            expected = coerce_decimal(purchase.unit_cost) * purchase.quantity
        if coerce_decimal(purchase.total) != expected:
            logger.warning(
                f"Purchase total differs from quantity * unit_cost for "
                f"purchase={purchase.id}: {purchase.total} != {expected}"
            )
            warnings += 1
    for expense in snapshot.expenses:
        if coerce_decimal(expense.amount) < 0:
            logger.warning(
                f"Expense amount is negative for expense={expense.id}: "
                f"{expense.amount}"
            )
            warnings += 1
    for asset in snapshot.assets:
        if coerce_decimal(asset.current_value) > coerce_decimal(
            asset.purchase_value
        ):
            logger.warning(
                f"Asset current value exceeds purchase value for "
                f"asset={asset.id}: {asset.current_value} > "
                f"{asset.purchase_value}"
            )
            warnings += 1
        if asset.condition not in ASSET_CONDITIONS:
            logger.warning(
                f"Unknown condition for asset={asset.id}: {asset.condition!r}"
            )
            warnings += 1
    return warnings


__all__ = ["validate_snapshot"]
