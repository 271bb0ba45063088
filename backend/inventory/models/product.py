"""Product ORM — one row per product document in the `products` collection.

Invariants:
    - id is a UUID primary key generated at insert — never taken from request input
    - document holds the submitted fields as-is (no coercion on create)
    - to_document() is the only serialization path: {"_id": str(id), **document}

Design Decisions:
    - JSON column over typed columns: create stores the body as given, update
      rewrites quantity/price with coerced values (ADR: document-store semantics)
    - Generic Uuid type: native on PostgreSQL, CHAR(32) on sqlite test runs
"""

import uuid

from sqlalchemy import JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base


class Product(Base):
    """Product document keyed by a store-assigned identifier."""
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    document: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )

    def to_document(self) -> dict:
        return {**self.document, "_id": str(self.id)}
