"""Settings Repository - Public store settings."""
from typing import Optional

from medshop.services.models import StoreSettings
from .base import BaseRepository

SETTINGS_COLUMNS = "store_name, company_name, logo_url, logo_width, banking_details, currency, show_store_name"


class SettingsRepository(BaseRepository):
    """Store settings operations."""

    async def get_public(self) -> Optional[StoreSettings]:
        """The first settings row; the public site has a single store."""
        result = await self.client.table("settings").select(SETTINGS_COLUMNS).limit(1).execute()
        if not result.data:
            return None
        return StoreSettings(**result.data[0])
