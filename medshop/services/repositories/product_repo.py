"""Product Repository - Storefront catalog reads."""
from typing import List, Optional

from medshop.config import PRODUCTS_PER_PAGE
from medshop.services.models import Product
from medshop.services.pagination import page_bounds
from .base import BaseRepository


class ProductRepository(BaseRepository):
    """Product database operations."""

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        result = await self.client.table("products").select("*").eq("id", product_id).limit(1).execute()
        if not result.data:
            return None
        return Product(**result.data[0])

    async def list_page(self, page: int, per_page: int = PRODUCTS_PER_PAGE) -> List[Product]:
        """One page of products ordered by name."""
        start, end = page_bounds(page, per_page)
        result = await (
            self.client.table("products")
            .select("*")
            .order("name", desc=False)
            .range(start, end)
            .execute()
        )
        return [Product(**row) for row in result.data or []]

    async def list_by_category(self, category_id: str) -> List[Product]:
        """All products in a category, ordered by name."""
        result = await (
            self.client.table("products")
            .select("*")
            .eq("category_id", category_id)
            .order("name", desc=False)
            .execute()
        )
        return [Product(**row) for row in result.data or []]

    async def count(self) -> int:
        result = await self.client.table("products").select("id", count="exact").execute()
        return result.count or 0
