"""
Admin Router

Back-office endpoints, all guarded by verify_admin.
"""
from fastapi import APIRouter

from .accounting import router as accounting_router

router = APIRouter(prefix="/admin", tags=["admin"])
router.include_router(accounting_router)

__all__ = ["router"]
