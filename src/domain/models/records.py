"""Domain models for shop transactional records.

Records are immutable snapshots supplied by a data provider. Reporting
services read them but never modify them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class SaleItem:
    """Single line of a multi-item sale."""

    product_id: int
    product_name: str
    quantity: int
    price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class SaleRecord:
    """Completed sale.

    Attributes:
        id: Synthetic sale identifier.
        date: Moment the sale was completed.
        total: Amount charged to the customer.
        payment_method: Cash, Card, or Mobile Payment.
        cashier: Name of the cashier who rang the sale.
        items: Optional line items.
        invoice_number: Optional invoice reference.
    """

    id: int
    date: datetime
    total: Decimal
    payment_method: str
    cashier: str
    items: tuple[SaleItem, ...] = ()
    invoice_number: str | None = None


@dataclass(frozen=True)
class PurchaseRecord:
    """Stock purchase from a supplier.

    ``total`` is expected to equal ``quantity * unit_cost``; reports trust
    the stored total.
    """

    id: int
    date: datetime
    quantity: int
    unit_cost: Decimal
    total: Decimal
    supplier: str
    product_id: int | None = None


@dataclass(frozen=True)
class ExpenseRecord:
    """Operating expense."""

    id: int
    date: datetime
    category: str
    amount: Decimal
    description: str = ""


@dataclass(frozen=True)
class AssetRecord:
    """Fixed asset owned by the shop."""

    id: int
    purchase_value: Decimal
    current_value: Decimal
    purchase_date: datetime
    condition: str
    name: str = ""
    category: str = ""


@dataclass(frozen=True)
class Product:
    """Inventory product.

    Attributes:
        id: Synthetic product identifier.
        price: Selling price per unit.
        stock: Units on hand.
        min_stock_level: Optional per-product low-stock threshold.
        name: Display name.
    """

    id: int
    price: Decimal
    stock: int
    min_stock_level: int | None = None
    name: str = ""


@dataclass(frozen=True)
class ShopSnapshot:
    """Immutable view of every record collection at one point in time."""

    sales: tuple[SaleRecord, ...] = field(default_factory=tuple)
    purchases: tuple[PurchaseRecord, ...] = field(default_factory=tuple)
    expenses: tuple[ExpenseRecord, ...] = field(default_factory=tuple)
    assets: tuple[AssetRecord, ...] = field(default_factory=tuple)
    products: tuple[Product, ...] = field(default_factory=tuple)


__all__ = [
    "SaleItem",
    "SaleRecord",
    "PurchaseRecord",
    "ExpenseRecord",
    "AssetRecord",
    "Product",
    "ShopSnapshot",
]
