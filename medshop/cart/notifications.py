"""
Toast notifications derived from cart outcomes.

The cart transitions never notify anyone themselves; the caller turns the
returned CartOutcome into a Notification and hands it to whatever sink the
presentation layer uses.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

from medshop.logging import get_logger, sanitize_string_for_logging
from .models import CartEvent, CartOutcome

logger = get_logger(__name__)

MSG_ITEM_REMOVED = "Item removed from cart."
MSG_CART_CLEARED = "Cart cleared."


class Severity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    severity: Severity
    message: str

    def to_dict(self) -> dict:
        return {"severity": self.severity.value, "message": self.message}


class NotificationSink(Protocol):
    def notify(self, notification: Notification) -> None: ...


class LoggingSink:
    """Writes toasts to the log; used where no UI is attached."""

    def notify(self, notification: Notification) -> None:
        logger.info(f"[{notification.severity.value}] {sanitize_string_for_logging(notification.message, 120)}")


class CollectingSink:
    """Keeps every toast in order, e.g. to return them in a response."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)


def stock_exceeded_message(stock: int, name: str) -> str:
    return f"Cannot add more than {stock} of {name} to cart."


def notification_for(outcome: CartOutcome) -> Optional[Notification]:
    """Toast for an outcome, or None when the change needs no feedback."""
    if outcome.event is CartEvent.STOCK_EXCEEDED:
        return Notification(Severity.ERROR, stock_exceeded_message(outcome.stock, outcome.product_name))
    if outcome.event is CartEvent.ADDED:
        return Notification(Severity.SUCCESS, f"{outcome.quantity} x {outcome.product_name} added to cart!")
    if outcome.event is CartEvent.REMOVED:
        return Notification(Severity.INFO, MSG_ITEM_REMOVED)
    if outcome.event is CartEvent.CLEARED:
        return Notification(Severity.INFO, MSG_CART_CLEARED)
    return None


def dispatch(outcome: CartOutcome, sink: NotificationSink) -> Optional[Notification]:
    """Send the outcome's toast to sink. Fire-and-forget."""
    notification = notification_for(outcome)
    if notification is not None:
        sink.notify(notification)
    return notification
