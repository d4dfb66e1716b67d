"""Tests for backend row models"""
from decimal import Decimal

from medshop.services.models import PaidOrder, Product, StoreSettings


def test_product_model(sample_product):
    product = Product(**sample_product)

    assert product.price == Decimal("12.5")
    assert product.cost == Decimal("7.25")
    assert product.stock == 8


def test_product_ignores_unknown_columns(sample_product):
    product = Product(**sample_product, created_at="2026-01-01T00:00:00Z", is_featured=True)
    assert not hasattr(product, "is_featured")


def test_product_null_stock_and_cost():
    product = Product(id="p9", name="Scalpel", price="4.20", stock=None, cost=None)

    assert product.stock == 0
    assert product.cost is None
    assert product.image_urls is None


def test_product_snapshot(sample_product):
    snapshot = Product(**sample_product).snapshot()

    assert snapshot == {
        "id": "product-123",
        "name": "Nitrile Examination Gloves",
        "description": "Box of 100, powder free",
        "price": Decimal("12.5"),
        "stock": 8,
        "image_urls": ["https://cdn.test/gloves.jpg"],
    }


def test_settings_model():
    settings = StoreSettings(store_name="MedSupply", currency="USD", user_id="u1")
    assert settings.store_name == "MedSupply"
    assert settings.logo_url is None


def test_paid_order_deleted_product():
    order = PaidOrder(id="o1", total=10, order_items=[{"quantity": 1, "products": None}])
    assert order.order_items[0].products is None
