"""Product Resource Handler — list/create/update/delete against the products collection.

Invariants:
    - Validation runs BEFORE any store access (a rejected request never touches the store)
    - list returns store-native order (no ORDER BY)
    - create stores the document as given (no coercion); update coerces quantity→int, price→float
    - update and delete touch at most one document; zero matches → ProductNotFoundError
    - update never echoes the document; productName is not updatable
    - failure_boundary turns every non-client error into OperationFailedError (generic
      per-operation message), logging the original with exc_info

Design Decisions:
    - Malformed identifiers raise ValueError inside the boundary and surface as 500,
      matching the historic behaviour of the UI contract
    - Update uses SELECT ... FOR UPDATE then rewrites the JSON document: one row lock
      on PostgreSQL makes the patch atomic; last write wins between requests
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.core.domain_types import ResourceOperation
from inventory.core.errors import (
    OperationFailedError, ProductNotFoundError, ProductValidationError,
)
from inventory.core.validate_product import (
    check_create_fields, check_product_id, check_update_fields,
    coerce_update_fields, to_product_id,
)
from inventory.models.product import Product

logger = logging.getLogger(__name__)

FAILURE_MESSAGES: dict[ResourceOperation, str] = {
    ResourceOperation.LIST: "Error fetching products",
    ResourceOperation.CREATE: "Error processing request",
    ResourceOperation.UPDATE: "Error processing request",
    ResourceOperation.DELETE: "Error processing delete request",
}


@asynccontextmanager
async def failure_boundary(
    operation: ResourceOperation, product_id: str | None = None,
) -> AsyncGenerator[None, None]:
    """Let client errors through; log anything else and replace it with a generic 500."""
    try:
        yield
    except (ProductValidationError, ProductNotFoundError):
        raise
    except Exception as e:
        logger.error(
            f"Error handling {operation.value} request: {e}",
            exc_info=True,
            extra={"operation": operation.value, "product_id": product_id},
        )
        raise OperationFailedError(
            FAILURE_MESSAGES[operation], operation.value,
        ) from e


class ProductService:
    """The four resource operations on the products collection."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_products(self) -> list[dict]:
        result = await self.db.execute(select(Product))
        return [product.to_document() for product in result.scalars().all()]

    async def create_product(self, payload: dict) -> dict:
        """Insert payload as a new document; returns it with the assigned _id."""
        check_create_fields(payload)
        product = Product(document=dict(payload))
        self.db.add(product)
        await self.db.commit()
        logger.info(
            "Product created",
            extra={"operation": "create", "product_id": str(product.id)},
        )
        return product.to_document()

    async def update_product(self, product_id: str | None, payload: dict) -> None:
        """Set quantity/price on one document."""
        check_update_fields(product_id, payload)
        patch = coerce_update_fields(payload)
        key = to_product_id(product_id)

        result = await self.db.execute(
            select(Product).where(Product.id == key).with_for_update(),
        )
        product = result.scalar_one_or_none()
        if product is None:
            raise ProductNotFoundError(product_id)

        # Reassign (not mutate) so the JSON column is flagged dirty
        product.document = {**product.document, **patch}
        await self.db.commit()
        logger.info(
            "Product updated",
            extra={"operation": "update", "product_id": product_id},
        )

    async def delete_product(self, product_id: str | None) -> None:
        """Hard-delete at most one document."""
        check_product_id(product_id)
        key = to_product_id(product_id)

        result = await self.db.execute(delete(Product).where(Product.id == key))
        if result.rowcount == 0:
            await self.db.rollback()
            raise ProductNotFoundError(product_id)
        await self.db.commit()
        logger.info(
            "Product deleted",
            extra={"operation": "delete", "product_id": product_id},
        )
