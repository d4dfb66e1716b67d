"""
Storefront Cart Router

Session-scoped shopping cart. Every mutation answers with the cart summary,
whether the change was accepted, and the toast the UI should show.

Cart storage is blocking (file or sync Upstash client), so mutations run in a
worker thread. The slot itself is loaded by the sync `get_request_cart`
dependency, which FastAPI already runs in its threadpool.
"""
import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from medshop.cart import CartManager, CartOutcome, notification_for
from medshop.errors import ERROR_PRODUCT_NOT_FOUND
from medshop.logging import get_logger, sanitize_id_for_logging
from medshop.services.currency import get_store_currency
from medshop.services.database import Database
from .deps import get_db, get_request_cart
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["storefront-cart"])


async def _cart_response(
    cart: CartManager, db: Database, outcome: Optional[CartOutcome] = None
) -> dict:
    notification = notification_for(outcome) if outcome else None
    return {
        **cart.summary(),
        "currency": get_store_currency(await db.get_store_settings()),
        "accepted": outcome.accepted if outcome else True,
        "notification": notification.to_dict() if notification else None,
    }


async def _apply(mutation, *args) -> CartOutcome:
    """Run a cart mutation off the event loop, mapping failures to HTTP errors."""
    try:
        return await asyncio.to_thread(mutation, *args)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except Exception as e:
        logger.error(f"Cart mutation failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update cart")


@router.get("/cart")
async def get_cart(
    cart: CartManager = Depends(get_request_cart),
    db: Database = Depends(get_db),
):
    """Current cart with totals."""
    return await _cart_response(cart, db)


@router.post("/cart/add")
async def add_to_cart(
    request: AddToCartRequest,
    cart: CartManager = Depends(get_request_cart),
    db: Database = Depends(get_db),
):
    """Add a catalog product; the cart stores a snapshot of it."""
    product = await db.get_product_by_id(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    outcome = await _apply(cart.add, product, request.quantity)
    if not outcome.accepted:
        logger.info(f"Stock exceeded for product {sanitize_id_for_logging(product.id)}")
    return await _cart_response(cart, db, outcome)


@router.patch("/cart/item")
async def update_cart_item(
    request: UpdateCartItemRequest,
    cart: CartManager = Depends(get_request_cart),
    db: Database = Depends(get_db),
):
    """Set item quantity (0 = remove). Checked against the stock recorded at add time."""
    outcome = await _apply(cart.update_quantity, request.product_id, request.quantity)
    return await _cart_response(cart, db, outcome)


@router.delete("/cart/item")
async def remove_cart_item(
    product_id: str,
    cart: CartManager = Depends(get_request_cart),
    db: Database = Depends(get_db),
):
    """Remove an item; unknown ids are ignored."""
    outcome = await _apply(cart.remove, product_id)
    return await _cart_response(cart, db, outcome)


@router.post("/cart/clear")
async def clear_cart(
    cart: CartManager = Depends(get_request_cart),
    db: Database = Depends(get_db),
):
    outcome = await _apply(cart.clear)
    return await _cart_response(cart, db, outcome)
