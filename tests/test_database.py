"""Tests for the Database facade"""
import pytest
from unittest.mock import Mock, AsyncMock, patch

import medshop.services.database as database_module
from medshop.services.database import Database, get_database, get_database_async


@pytest.fixture(autouse=True)
def reset_singleton(monkeypatch):
    monkeypatch.setattr(database_module, "_db", None)


def test_get_database_before_init():
    with pytest.raises(RuntimeError):
        get_database()


@pytest.mark.asyncio
async def test_lazy_init(mock_supabase_client):
    with patch("medshop.services.database.get_supabase", AsyncMock(return_value=mock_supabase_client)):
        db = await get_database_async()

    assert db.client is mock_supabase_client
    assert get_database() is db


@pytest.mark.asyncio
async def test_get_product_by_id(mock_supabase_client, sample_product):
    table = mock_supabase_client.table.return_value
    table.execute = AsyncMock(return_value=Mock(data=[sample_product]))

    product = await Database(mock_supabase_client).get_product_by_id("product-123")

    table.eq.assert_called_with("id", "product-123")
    assert product.name == "Nitrile Examination Gloves"


@pytest.mark.asyncio
async def test_store_settings_failure_returns_none(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(side_effect=RuntimeError("boom"))

    assert await Database(mock_supabase_client).get_store_settings() is None


@pytest.mark.asyncio
async def test_store_settings(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(
        return_value=Mock(data=[{"store_name": "MedSupply", "currency": "KES"}])
    )

    settings = await Database(mock_supabase_client).get_store_settings()

    assert settings.currency == "KES"


@pytest.mark.asyncio
async def test_list_products_by_category(mock_supabase_client, sample_product):
    table = mock_supabase_client.table.return_value
    table.execute = AsyncMock(return_value=Mock(data=[sample_product]))

    products = await Database(mock_supabase_client).list_products_by_category("ppe")

    table.eq.assert_called_with("category_id", "ppe")
    table.order.assert_called_with("name", desc=False)
    table.range.assert_not_called()
    assert [p.id for p in products] == ["product-123"]


@pytest.mark.asyncio
async def test_get_category_by_id(mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.execute = AsyncMock(return_value=Mock(data=[{"id": "ppe", "name": "PPE"}]))

    category = await Database(mock_supabase_client).get_category_by_id("ppe")

    mock_supabase_client.table.assert_called_with("categories")
    table.eq.assert_called_with("id", "ppe")
    assert category.name == "PPE"


@pytest.mark.asyncio
async def test_missing_category(mock_supabase_client):
    assert await Database(mock_supabase_client).get_category_by_id("nope") is None
