"""Public store settings."""
from fastapi import APIRouter, Depends

from medshop.services.currency import get_store_currency
from medshop.services.database import Database
from .deps import get_db

router = APIRouter(tags=["storefront-settings"])


@router.get("/settings")
async def get_settings(db: Database = Depends(get_db)):
    settings = await db.get_store_settings()
    data = settings.model_dump() if settings else {}
    data["currency"] = get_store_currency(settings)
    return data
