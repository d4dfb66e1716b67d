"""
Repository Pattern for Database Operations

- ProductRepository: Product catalog, pagination, products by category
- CategoryRepository: Category lookups
- SettingsRepository: Public store settings
- AccountingRepository: Paid orders and expenses for P&L
"""
from .product_repo import ProductRepository
from .category_repo import CategoryRepository
from .settings_repo import SettingsRepository
from .accounting_repo import AccountingRepository

__all__ = [
    "ProductRepository",
    "CategoryRepository",
    "SettingsRepository",
    "AccountingRepository",
]
