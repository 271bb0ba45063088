"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps the store-assigned UUID — never use a raw query string in store calls
    - SearchField values match the selector labels the UI shows (All/Name/Quantity/Price)
    - PRODUCT_FIELDS is the single source of truth for document field names

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compare against query strings without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", UUID)


# ─── Field Names ─────────────────────────────────────────────────

NAME_FIELD = "productName"
QUANTITY_FIELD = "quantity"
PRICE_FIELD = "price"

PRODUCT_FIELDS: tuple[str, ...] = (NAME_FIELD, QUANTITY_FIELD, PRICE_FIELD)
UPDATABLE_FIELDS: tuple[str, ...] = (QUANTITY_FIELD, PRICE_FIELD)


# ─── Enums ───────────────────────────────────────────────────────

class SearchField(str, Enum):
    """Filter selector — which document field a search term is tested against."""
    ALL = "All"
    NAME = "Name"
    QUANTITY = "Quantity"
    PRICE = "Price"


class ResourceOperation(str, Enum):
    """The four operations on the product collection, for logs and error context."""
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
