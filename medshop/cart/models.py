"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from medshop.services.money import to_decimal, to_float, multiply


@dataclass(frozen=True)
class CartItem:
    """
    Single line item: a product snapshot plus a quantity.

    The snapshot (name, price, stock...) is taken when the product is added
    and is not refreshed from the catalog afterwards, so `stock` is the
    ceiling for `quantity`.
    """
    id: str
    name: str
    price: Decimal
    stock: int
    quantity: int
    description: Optional[str] = None
    image_urls: Optional[List[str]] = None

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))

    @property
    def line_total(self) -> Decimal:
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        """Storage/JSON representation."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": to_float(self.price),
            "stock": self.stock,
            "image_urls": list(self.image_urls) if self.image_urls is not None else None,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """
        Create from a stored dictionary.

        Raises KeyError, TypeError or ValueError when the shape is wrong.
        """
        if not isinstance(data, dict):
            raise TypeError(f"cart item must be an object, got {type(data).__name__}")

        price = data["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
            raise TypeError("price must be a number")
        if not to_decimal(price).is_finite() or price < 0:
            raise ValueError("price must be a finite non-negative number")

        stock = data["stock"]
        quantity = data["quantity"]
        for key, value in (("stock", stock), ("quantity", quantity)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{key} must be an integer")
        if stock < 0:
            raise ValueError("stock must not be negative")
        if quantity < 1:
            raise ValueError("quantity must be positive")

        image_urls = data.get("image_urls")
        if image_urls is not None and not isinstance(image_urls, list):
            raise TypeError("image_urls must be a list")

        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            description=data.get("description"),
            price=to_decimal(price),
            stock=stock,
            image_urls=image_urls,
            quantity=quantity,
        )


@dataclass
class Cart:
    """Ordered line items with derived totals."""
    items: List[CartItem] = field(default_factory=list)

    @property
    def total(self) -> Decimal:
        """Sum of price x quantity, recomputed on every access."""
        return sum((item.line_total for item in self.items), Decimal("0"))

    @property
    def item_count(self) -> int:
        """Sum of quantities, recomputed on every access."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items


class CartEvent(str, Enum):
    """Result code of a cart transition."""
    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"
    CLEARED = "cleared"
    STOCK_EXCEEDED = "stock_exceeded"


@dataclass(frozen=True)
class CartOutcome:
    """New item list plus what happened. Rejections carry the unchanged list."""
    items: List[CartItem]
    event: CartEvent
    product_name: Optional[str] = None
    quantity: Optional[int] = None
    stock: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return self.event is not CartEvent.STOCK_EXCEEDED
