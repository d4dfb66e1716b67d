"""API routers."""
from .admin import router as admin_router
from .cart import router as cart_router
from .products import router as products_router
from .settings import router as settings_router

__all__ = ["admin_router", "cart_router", "products_router", "settings_router"]
