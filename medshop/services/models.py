"""Database Models - Pydantic models for backend rows."""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, field_validator

from medshop.services.money import to_decimal as _to_decimal


class Product(BaseModel):
    """Catalog product."""
    id: str
    name: str
    description: Optional[str] = None
    price: Decimal
    stock: int = 0
    image_urls: Optional[List[str]] = None
    cost: Optional[Decimal] = None  # Unit purchase cost, admin only
    category_id: Optional[str] = None

    class Config:
        extra = "ignore"  # Ignore unknown columns

    @field_validator("price", mode="before")
    @classmethod
    def convert_price(cls, v):
        return _to_decimal(v)

    @field_validator("cost", mode="before")
    @classmethod
    def convert_cost(cls, v):
        return None if v is None else _to_decimal(v)

    @field_validator("stock", mode="before")
    @classmethod
    def default_stock(cls, v):
        return 0 if v is None else v

    def snapshot(self) -> dict:
        """Fields copied into a cart line item."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
            "image_urls": list(self.image_urls) if self.image_urls is not None else None,
        }


class Category(BaseModel):
    """Product category."""
    id: str
    name: str

    class Config:
        extra = "ignore"


class StoreSettings(BaseModel):
    """Public store settings row."""
    store_name: Optional[str] = None
    company_name: Optional[str] = None
    logo_url: Optional[str] = None
    logo_width: Optional[int] = None
    banking_details: Optional[str] = None
    currency: Optional[str] = None
    show_store_name: Optional[bool] = None

    class Config:
        extra = "ignore"


class ProductCost(BaseModel):
    cost: Decimal = Decimal("0")

    @field_validator("cost", mode="before")
    @classmethod
    def convert_cost(cls, v):
        return _to_decimal(v)


class PaidOrderItem(BaseModel):
    quantity: int
    products: Optional[ProductCost] = None  # Null when the product was deleted


class PaidOrder(BaseModel):
    """Paid order with the unit cost of each line, for P&L."""
    id: str
    total: Decimal
    order_items: List[PaidOrderItem] = []

    class Config:
        extra = "ignore"

    @field_validator("total", mode="before")
    @classmethod
    def convert_total(cls, v):
        return _to_decimal(v)


class Expense(BaseModel):
    """Operating expense."""
    id: Optional[str] = None
    name: str
    amount: Decimal
    expense_date: date

    class Config:
        extra = "ignore"

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount(cls, v):
        return _to_decimal(v)
