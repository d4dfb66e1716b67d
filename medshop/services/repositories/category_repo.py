"""Category Repository - Category lookups for storefront browsing."""
from typing import Optional

from medshop.services.models import Category
from .base import BaseRepository


class CategoryRepository(BaseRepository):
    """Category database operations."""

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        result = await self.client.table("categories").select("id, name").eq("id", category_id).limit(1).execute()
        if not result.data:
            return None
        return Category(**result.data[0])
