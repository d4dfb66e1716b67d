"""
Store currency resolution and display symbols.

The store has a single currency configured in its settings row; amounts are
stored in that currency and never converted.
"""
from typing import Dict, Optional, TYPE_CHECKING

from medshop import config

if TYPE_CHECKING:
    from medshop.services.models import StoreSettings

DEFAULT_CURRENCY = "USD"

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "KES": "KSh",
    "NGN": "₦",
    "ZAR": "R",
    "UGX": "USh",
    "TZS": "TSh",
}

# Symbol goes before the amount
PREFIX_CURRENCIES = frozenset({"USD", "EUR", "GBP", "INR", "JPY", "NGN", "ZAR"})

# No minor units
INTEGER_CURRENCIES = frozenset({"JPY", "UGX", "TZS"})


def get_store_currency(settings: Optional["StoreSettings"] = None) -> str:
    """
    Currency code used to display prices.

    Falls back to STORE_CURRENCY from the environment, then USD.
    """
    if settings is not None and settings.currency:
        return settings.currency.upper()
    return config.STORE_CURRENCY or DEFAULT_CURRENCY
