"""Product Schemas — request bodies and response envelopes for /api/product.

Invariants:
    - ProductCreate/ProductUpdate accept ANY JSON value per field: presence and
      numeric rules are enforced by core/validate_product, not by Pydantic
    - ProductCreate keeps extra keys (extra="allow") so the document is stored as given
    - Field names are the wire names (productName, quantity, price)

Design Decisions:
    - Loose field types: a 422-style type error from Pydantic would hide the
      create/update validation asymmetry behind one generic rule
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ProductCreate(BaseModel):
    """Candidate product document for the create operation."""
    model_config = ConfigDict(extra="allow")

    productName: Any = None
    quantity: Any = None
    price: Any = None

    def to_document(self) -> dict:
        """Submitted fields only — unset fields are left out, store-owned _id is dropped."""
        document = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set
        }
        document.update(self.model_extra or {})
        document.pop("_id", None)
        return document


class ProductUpdate(BaseModel):
    """quantity/price patch; productName is not updatable through this path."""
    model_config = ConfigDict(extra="ignore")

    quantity: Any = None
    price: Any = None


class MessageResponse(BaseModel):
    message: str


class ProductListResponse(MessageResponse):
    products: list[dict]


class ProductCreatedResponse(MessageResponse):
    data: dict
