"""Product Routes — REST surface of the product collection at /api/product.

Invariants:
    - GET/POST address the collection; PUT/DELETE address one document via ?id=
    - Every handler runs inside failure_boundary: client errors keep their status,
      everything else becomes a generic 500 body
    - Success bodies: {"message"} plus "products" (list) or "data" (create)
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.core.domain_types import ResourceOperation
from inventory.infrastructure.database import get_db
from inventory.schemas.product import (
    MessageResponse, ProductCreate, ProductCreatedResponse,
    ProductListResponse, ProductUpdate,
)
from inventory.services.product_service import ProductService, failure_boundary

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/product", tags=["products"])


@router.get("", response_model=ProductListResponse)
async def list_products(db: AsyncSession = Depends(get_db)):
    """All product documents, store-native order."""
    async with failure_boundary(ResourceOperation.LIST):
        products = await ProductService(db).list_products()
    return {"message": "Products fetched successfully", "products": products}


@router.post("", response_model=ProductCreatedResponse)
async def create_product(
    body: ProductCreate, db: AsyncSession = Depends(get_db),
):
    async with failure_boundary(ResourceOperation.CREATE):
        data = await ProductService(db).create_product(body.to_document())
    return {"message": "Product added successfully", "data": data}


@router.put("", response_model=MessageResponse)
async def update_product(
    body: ProductUpdate,
    product_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
):
    """Set quantity and price; the product name is left untouched."""
    async with failure_boundary(ResourceOperation.UPDATE, product_id):
        await ProductService(db).update_product(product_id, body.model_dump())
    return {"message": "Product updated successfully"}


@router.delete("", response_model=MessageResponse)
async def delete_product(
    product_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
):
    async with failure_boundary(ResourceOperation.DELETE, product_id):
        await ProductService(db).delete_product(product_id)
    return {"message": "Product deleted successfully"}
