"""
Storefront Catalog Router

Paginated product listing, product detail and products by category.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from medshop.config import PRODUCTS_PER_PAGE
from medshop.errors import ERROR_CATEGORY_NOT_FOUND, ERROR_PRODUCT_NOT_FOUND
from medshop.logging import get_logger
from medshop.services.database import Database
from medshop.services.money import to_float
from medshop.services.pagination import is_valid_page, total_pages
from .deps import get_db

logger = get_logger(__name__)

router = APIRouter(tags=["storefront-products"])


def _product_dict(product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": to_float(product.price),
        "stock": product.stock,
        "image_urls": product.image_urls or [],
        "category_id": product.category_id,
    }


@router.get("/products")
async def list_products(page: int = Query(1, ge=1), db: Database = Depends(get_db)):
    """One page of products ordered by name."""
    count = await db.count_products()
    pages = total_pages(count)
    products = await db.list_products(page) if is_valid_page(page, pages) else []
    return {
        "products": [_product_dict(p) for p in products],
        "page": page,
        "per_page": PRODUCTS_PER_PAGE,
        "total": count,
        "total_pages": pages,
    }


@router.get("/products/{product_id}")
async def get_product(product_id: str, db: Database = Depends(get_db)):
    product = await db.get_product_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return _product_dict(product)


@router.get("/categories/{category_id}/products")
async def list_category_products(category_id: str, db: Database = Depends(get_db)):
    """Every product in a category, ordered by name. Not paginated."""
    category = await db.get_category_by_id(category_id)
    if not category:
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)

    products = await db.list_products_by_category(category_id)
    return {
        "category": {"id": category.id, "name": category.name},
        "products": [_product_dict(p) for p in products],
    }
