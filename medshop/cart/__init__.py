"""Cart package: models, pure transitions, storage, notifications and manager."""
from .models import CartItem, Cart, CartEvent, CartOutcome
from .notifications import Notification, Severity, dispatch, notification_for
from .service import CartManager, get_cart_manager
from .storage import (
    CartStorage,
    FileCartStorage,
    MemoryCartStorage,
    RedisCartStorage,
    get_cart_storage,
)

__all__ = [
    "CartItem",
    "Cart",
    "CartEvent",
    "CartOutcome",
    "CartManager",
    "get_cart_manager",
    "CartStorage",
    "FileCartStorage",
    "MemoryCartStorage",
    "RedisCartStorage",
    "get_cart_storage",
    "Notification",
    "Severity",
    "dispatch",
    "notification_for",
]
