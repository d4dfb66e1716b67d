"""
API Pydantic Models

Request bodies shared by the storefront and admin routers.
"""
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    product_id: str
    quantity: int  # 0 or less removes the line


# ==================== ACCOUNTING MODELS ====================

class ExpenseCreate(BaseModel):
    name: str = Field(..., min_length=2)
    amount: Decimal = Field(..., gt=0)
    expense_date: date
