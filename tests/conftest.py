"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

# Set test environment variables before medshop.config is imported
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("ADMIN_API_KEY", "test_admin_key")
os.environ.setdefault("CART_STORAGE_BACKEND", "memory")

from medshop.cart import CartManager, MemoryCartStorage
from medshop.services.models import Category, Product


@pytest.fixture
def gloves():
    """Gloves snapshot as the storefront passes it to the cart"""
    return {"id": "p1", "name": "Gloves", "price": 10, "stock": 5}


@pytest.fixture
def sample_product():
    """Catalog product row"""
    return {
        "id": "product-123",
        "name": "Nitrile Examination Gloves",
        "description": "Box of 100, powder free",
        "price": 12.5,
        "stock": 8,
        "image_urls": ["https://cdn.test/gloves.jpg"],
        "cost": 7.25,
        "category_id": "ppe",
    }


@pytest.fixture
def product_model(sample_product):
    return Product(**sample_product)


@pytest.fixture
def memory_storage():
    """Fresh in-memory cart slot"""
    return MemoryCartStorage("cart", slots={})


@pytest.fixture
def cart_manager(memory_storage):
    return CartManager(memory_storage)


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client; execute() is awaitable"""
    client = Mock()

    table_mock = Mock()
    for method in ("select", "insert", "update", "delete", "eq", "limit", "order", "gte", "lte", "range"):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[], count=0))

    client.table.return_value = table_mock
    return client


@pytest.fixture
def mock_database(product_model):
    """Mock Database facade"""
    db = Mock()
    db.get_product_by_id = AsyncMock(return_value=product_model)
    db.list_products = AsyncMock(return_value=[product_model])
    db.count_products = AsyncMock(return_value=1)
    db.list_products_by_category = AsyncMock(return_value=[product_model])
    db.get_category_by_id = AsyncMock(return_value=Category(id="ppe", name="PPE"))
    db.get_store_settings = AsyncMock(return_value=None)
    db.get_paid_orders = AsyncMock(return_value=[])
    db.get_expenses = AsyncMock(return_value=[])
    db.create_expense = AsyncMock()
    db.delete_expense = AsyncMock(return_value=True)
    return db
