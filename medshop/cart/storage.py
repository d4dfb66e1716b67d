"""
Cart persistence: one serialized item list per storage slot.

A slot is addressed by a key ("cart" by default; the HTTP layer uses one
key per browsing session). `load()` never raises: a missing or unreadable
slot is an empty cart. `save()` overwrites the whole slot.
"""
import json
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from medshop import config
from medshop.errors import ERROR_CART_UNAVAILABLE
from medshop.logging import get_logger, sanitize_string_for_logging
from .models import CartItem

logger = get_logger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


def serialize_items(items: List[CartItem]) -> str:
    return json.dumps([item.to_dict() for item in items])


def deserialize_items(raw: str) -> List[CartItem]:
    """Parse a stored list. Raises ValueError/TypeError/KeyError on bad content."""
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TypeError(f"stored cart must be a list, got {type(data).__name__}")
    items = [CartItem.from_dict(entry) for entry in data]
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"duplicate line item {item.id}")
        if item.quantity > item.stock:
            raise ValueError(f"line item {item.id} exceeds its stock ({item.quantity} > {item.stock})")
        seen.add(item.id)
    return items


class CartStorage:
    """Base slot adapter. Subclasses implement the raw read/write/delete."""

    def __init__(self, key: str = config.CART_STORAGE_KEY):
        self.key = key

    def _read(self) -> Optional[str]:
        raise NotImplementedError

    def _write(self, raw: str) -> None:
        raise NotImplementedError

    def _delete(self) -> None:
        raise NotImplementedError

    def load(self) -> List[CartItem]:
        """Stored items, or [] when the slot is absent or malformed."""
        safe_key = sanitize_string_for_logging(self.key)
        try:
            raw = self._read()
        except Exception as e:
            logger.error(f"Failed to read cart slot {safe_key}: {e}")
            return []

        if raw is None or raw == "":
            return []

        try:
            return deserialize_items(raw)
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(f"Corrupted cart data in slot {safe_key}: {e}")
            return []

    def save(self, items: List[CartItem]) -> None:
        raw = serialize_items(items)
        try:
            self._write(raw)
        except Exception as e:
            logger.error(f"Failed to save cart slot {sanitize_string_for_logging(self.key)}: {e}")
            raise ValueError(f"{ERROR_CART_UNAVAILABLE}: {e}") from e

    def clear(self) -> None:
        """Remove the slot entirely."""
        try:
            self._delete()
        except Exception as e:
            logger.error(f"Failed to clear cart slot {sanitize_string_for_logging(self.key)}: {e}")
            raise ValueError(f"{ERROR_CART_UNAVAILABLE}: {e}") from e


class MemoryCartStorage(CartStorage):
    """Process-local slots. Instances sharing `slots` see each other's writes."""

    def __init__(self, key: str = config.CART_STORAGE_KEY, slots: Optional[Dict[str, str]] = None):
        super().__init__(key)
        self.slots = slots if slots is not None else {}

    def _read(self) -> Optional[str]:
        return self.slots.get(self.key)

    def _write(self, raw: str) -> None:
        self.slots[self.key] = raw

    def _delete(self) -> None:
        self.slots.pop(self.key, None)


class FileCartStorage(CartStorage):
    """One JSON file per slot under a directory."""

    def __init__(self, key: str = config.CART_STORAGE_KEY, directory: Optional[os.PathLike] = None):
        if not _SAFE_KEY.match(key):
            raise ValueError(f"invalid cart storage key: {key!r}")
        super().__init__(key)
        self.directory = Path(directory if directory is not None else config.CART_STORAGE_DIR)

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def _read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def _write(self, raw: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{self.key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(raw)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def _delete(self) -> None:
        self.path.unlink(missing_ok=True)


class RedisCartStorage(CartStorage):
    """Upstash Redis key cart:{key}. No TTL: carts do not expire."""

    def __init__(self, key: str = config.CART_STORAGE_KEY, redis=None):
        super().__init__(key)
        self._redis = redis

    @property
    def redis(self):
        """Redis client (lazy initialization)."""
        if self._redis is None:
            from medshop.db import get_redis_sync
            self._redis = get_redis_sync()
        return self._redis

    @property
    def redis_key(self) -> str:
        from medshop.db import RedisKeys
        return RedisKeys.cart_key(self.key)

    def _read(self) -> Optional[str]:
        data = self.redis.get(self.redis_key)
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return data

    def _write(self, raw: str) -> None:
        self.redis.set(self.redis_key, raw)

    def _delete(self) -> None:
        self.redis.delete(self.redis_key)


_memory_slots: Dict[str, str] = {}


def get_cart_storage(key: str = config.CART_STORAGE_KEY, backend: Optional[str] = None) -> CartStorage:
    """Storage for a slot using the configured backend."""
    backend = (backend or config.CART_STORAGE_BACKEND).lower()
    if backend == "memory":
        return MemoryCartStorage(key, slots=_memory_slots)
    if backend == "file":
        return FileCartStorage(key)
    if backend == "redis":
        return RedisCartStorage(key)
    raise ValueError(f"Unknown CART_STORAGE_BACKEND: {backend}")
