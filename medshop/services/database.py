"""
Supabase Database Service

Provides Database class with all operations via Repository pattern.

Usage:
    from medshop.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    db = get_database()
    product = await db.get_product_by_id("p1")
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from supabase._async.client import AsyncClient

from medshop.db import get_supabase
from medshop.logging import get_logger
from medshop.services.models import Category, Expense, PaidOrder, Product, StoreSettings
from medshop.services.repositories import (
    AccountingRepository,
    CategoryRepository,
    ProductRepository,
    SettingsRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Supabase database client with all operations.

    Must be initialized via `create()` or `init_database()`.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

        self._products_repo = ProductRepository(self.client)
        self._categories_repo = CategoryRepository(self.client)
        self._settings_repo = SettingsRepository(self.client)
        self._accounting_repo = AccountingRepository(self.client)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory: builds the Supabase client and repositories."""
        client = await get_supabase()
        return cls(client)

    # ==================== PRODUCT OPERATIONS ====================

    async def get_product_by_id(self, product_id: str) -> Optional[Product]:
        return await self._products_repo.get_by_id(product_id)

    async def list_products(self, page: int) -> List[Product]:
        return await self._products_repo.list_page(page)

    async def count_products(self) -> int:
        return await self._products_repo.count()

    async def list_products_by_category(self, category_id: str) -> List[Product]:
        return await self._products_repo.list_by_category(category_id)

    # ==================== CATEGORY OPERATIONS ====================

    async def get_category_by_id(self, category_id: str) -> Optional[Category]:
        return await self._categories_repo.get_by_id(category_id)

    # ==================== SETTINGS OPERATIONS ====================

    async def get_store_settings(self) -> Optional[StoreSettings]:
        try:
            return await self._settings_repo.get_public()
        except Exception as e:
            logger.warning(f"Failed to get store settings: {e}")
            return None

    # ==================== ACCOUNTING OPERATIONS ====================

    async def get_paid_orders(self, date_from: date, date_to: date) -> List[PaidOrder]:
        return await self._accounting_repo.get_paid_orders(date_from, date_to)

    async def get_expenses(self, date_from: date, date_to: date) -> List[Expense]:
        return await self._accounting_repo.get_expenses(date_from, date_to)

    async def create_expense(self, name: str, amount: Decimal, expense_date: date) -> Expense:
        return await self._accounting_repo.create_expense(name, amount, expense_date)

    async def delete_expense(self, expense_id: str) -> bool:
        return await self._accounting_repo.delete_expense(expense_id)


_db: Optional[Database] = None


async def init_database() -> Database:
    """Create the Database singleton. Call once at startup."""
    global _db
    if _db is None:
        _db = await Database.create()
        logger.info("Database initialized")
    return _db


async def get_database_async() -> Database:
    """Get database instance with lazy async initialization."""
    if _db is None:
        return await init_database()
    return _db


def get_database() -> Database:
    """Get database instance (sync accessor).

    Raises:
        RuntimeError: If database not initialized
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Use 'await get_database_async()' for lazy init, "
            "or call 'await init_database()' at startup."
        )
    return _db
