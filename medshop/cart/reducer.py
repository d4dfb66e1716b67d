"""
Pure cart transitions.

Each function takes the current item list and returns a CartOutcome holding
the next list and an event code. Inputs are never mutated; a rejected
transition returns the very same list it was given.
"""
from dataclasses import replace
from typing import Any, List, Mapping, Union

from medshop.errors import ERROR_INVALID_QUANTITY
from .models import CartEvent, CartItem, CartOutcome

ProductLike = Union[Mapping[str, Any], Any]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _snapshot(product: ProductLike) -> dict:
    """Snapshot fields from a catalog Product, a CartItem or a plain mapping."""
    if hasattr(product, "snapshot"):
        return product.snapshot()
    if isinstance(product, CartItem):
        data = product.to_dict()
        data.pop("quantity")
        data["price"] = product.price
        return data
    image_urls = product.get("image_urls")
    return {
        "id": product["id"],
        "name": product["name"],
        "description": product.get("description"),
        "price": product["price"],
        "stock": product["stock"],
        "image_urls": list(image_urls) if image_urls is not None else None,
    }


def add_item(items: List[CartItem], product: ProductLike, quantity_to_add: int = 1) -> CartOutcome:
    """
    Add quantity_to_add units of product.

    An existing line is incremented in place; the ceiling is the stock of the
    product being added, which becomes the line's recorded stock. A new line
    is appended at the end.
    """
    if not _is_int(quantity_to_add) or quantity_to_add < 1:
        raise ValueError(ERROR_INVALID_QUANTITY)

    snapshot = _snapshot(product)
    product_id = str(snapshot["id"])
    stock = int(snapshot["stock"])
    name = snapshot["name"]

    for index, existing in enumerate(items):
        if existing.id != product_id:
            continue
        new_quantity = existing.quantity + quantity_to_add
        if new_quantity > stock:
            return CartOutcome(items, CartEvent.STOCK_EXCEEDED, name, quantity_to_add, stock)
        updated = list(items)
        updated[index] = replace(existing, quantity=new_quantity, stock=stock)
        return CartOutcome(updated, CartEvent.ADDED, name, quantity_to_add, stock)

    if quantity_to_add > stock:
        return CartOutcome(items, CartEvent.STOCK_EXCEEDED, name, quantity_to_add, stock)

    item = CartItem(
        id=product_id,
        name=name,
        description=snapshot.get("description"),
        price=snapshot["price"],
        stock=stock,
        image_urls=snapshot.get("image_urls"),
        quantity=quantity_to_add,
    )
    return CartOutcome([*items, item], CartEvent.ADDED, name, quantity_to_add, stock)


def remove_item(items: List[CartItem], product_id: str) -> CartOutcome:
    """Drop the line for product_id. Unknown ids are a no-op."""
    removed = next((item for item in items if item.id == product_id), None)
    remaining = [item for item in items if item.id != product_id]
    return CartOutcome(
        remaining,
        CartEvent.REMOVED,
        removed.name if removed else None,
        removed.quantity if removed else None,
    )


def update_quantity(items: List[CartItem], product_id: str, quantity: int) -> CartOutcome:
    """
    Set the quantity of one line.

    quantity <= 0 removes the line. A quantity above the line's recorded
    stock is rejected and the line keeps its quantity.
    """
    if not _is_int(quantity):
        raise ValueError("quantity must be an integer")

    if quantity <= 0:
        return remove_item(items, product_id)

    for index, existing in enumerate(items):
        if existing.id != product_id:
            continue
        if quantity > existing.stock:
            return CartOutcome(items, CartEvent.STOCK_EXCEEDED, existing.name, quantity, existing.stock)
        updated = list(items)
        updated[index] = replace(existing, quantity=quantity)
        return CartOutcome(updated, CartEvent.UPDATED, existing.name, quantity, existing.stock)

    return CartOutcome(list(items), CartEvent.UPDATED)


def clear(items: List[CartItem]) -> CartOutcome:
    return CartOutcome([], CartEvent.CLEARED)
