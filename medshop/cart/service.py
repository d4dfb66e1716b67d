"""Cart state manager: canonical item list plus persistence."""
from decimal import Decimal
from typing import List, Optional

from medshop.logging import get_logger, sanitize_id_for_logging
from medshop.services.money import to_float
from . import reducer
from .models import Cart, CartEvent, CartItem, CartOutcome
from .storage import CartStorage, get_cart_storage

logger = get_logger(__name__)


class CartManager:
    """
    Owns the in-memory cart for one storage slot and mediates all mutations.

    Built once per slot and passed to whatever needs it. Loads the slot on
    construction, saves after every accepted mutation. Mutations return the
    CartOutcome; turning that into user feedback is up to the caller
    (see medshop.cart.notifications).

    Assumes a single writer per slot. `reload()` re-reads the slot when
    another writer may have changed it; otherwise the last save wins.
    """

    def __init__(self, storage: CartStorage):
        self.storage = storage
        self._items: List[CartItem] = storage.load()

    @property
    def items(self) -> List[CartItem]:
        return list(self._items)

    @property
    def cart(self) -> Cart:
        return Cart(items=list(self._items))

    @property
    def total(self) -> Decimal:
        return self.cart.total

    @property
    def item_count(self) -> int:
        return self.cart.item_count

    def _commit(self, outcome: CartOutcome) -> CartOutcome:
        if outcome.accepted:
            self._items = list(outcome.items)
            if outcome.event is CartEvent.CLEARED:
                self.storage.clear()
            else:
                self.storage.save(self._items)
        else:
            logger.info(
                f"Cart change rejected for {sanitize_id_for_logging(self.storage.key)}: "
                f"{outcome.event.value} (stock {outcome.stock})"
            )
        return outcome

    def add(self, product, quantity_to_add: int = 1) -> CartOutcome:
        """Add units of a product snapshot; rejected past its stock."""
        return self._commit(reducer.add_item(self._items, product, quantity_to_add))

    def remove(self, product_id: str) -> CartOutcome:
        return self._commit(reducer.remove_item(self._items, product_id))

    def update_quantity(self, product_id: str, quantity: int) -> CartOutcome:
        """Set a line's quantity; <= 0 removes it, above its stock is rejected."""
        return self._commit(reducer.update_quantity(self._items, product_id, quantity))

    def clear(self) -> CartOutcome:
        """Empty the cart and drop its slot."""
        return self._commit(reducer.clear(self._items))

    def reload(self) -> List[CartItem]:
        """Replace in-memory state with what the slot holds now."""
        self._items = self.storage.load()
        return self.items

    def summary(self) -> dict:
        """Cart as returned by the HTTP API."""
        cart = self.cart
        return {
            "items": [
                {**item.to_dict(), "line_total": to_float(item.line_total)}
                for item in cart.items
            ],
            "total": to_float(cart.total),
            "item_count": cart.item_count,
            "is_empty": cart.is_empty,
        }


def get_cart_manager(key: Optional[str] = None) -> CartManager:
    """CartManager for a slot on the configured storage backend."""
    storage = get_cart_storage(key) if key else get_cart_storage()
    return CartManager(storage)
