"""
Shared Dependencies for Routers

Each request gets its database handle and cart manager through Depends,
so tests can swap them with app.dependency_overrides.
"""
import re
import secrets

from fastapi import Depends, Request, Response

from medshop import config
from medshop.cart import CartManager, get_cart_manager
from medshop.services.database import Database, get_database_async

CART_COOKIE_MAX_AGE = 60 * 60 * 24 * 365

_SESSION_ID = re.compile(r"^[A-Za-z0-9_-]{16,64}$")


async def get_db() -> Database:
    return await get_database_async()


def get_cart_session(request: Request, response: Response) -> str:
    """Cart slot key for this browser; issues the cookie on first visit."""
    session_id = request.cookies.get(config.CART_SESSION_COOKIE)
    if not session_id or not _SESSION_ID.match(session_id):
        session_id = secrets.token_urlsafe(24)
        response.set_cookie(
            config.CART_SESSION_COOKIE,
            session_id,
            max_age=CART_COOKIE_MAX_AGE,
            httponly=True,
            samesite="lax",
        )
    return session_id


def get_request_cart(session_id: str = Depends(get_cart_session)) -> CartManager:
    """CartManager for the caller's slot, loaded fresh for this request."""
    return get_cart_manager(f"{config.CART_STORAGE_KEY}-{session_id}")
