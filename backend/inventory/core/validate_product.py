"""Product Validation — presence checks and numeric coercion for create/update bodies.

Invariants:
    - All functions are PURE: no IO, raise ProductValidationError or return a value
    - Create uses TRUTHINESS: missing, "", 0, False and None are all rejected
    - Update uses a NULL CHECK: 0 is accepted, only missing/None are rejected
    - parse_int/parse_float read a leading number like a browser's parseInt/parseFloat,
      including parseInt's 0x hex prefix

Design Decisions:
    - The create/update asymmetry is kept on purpose until product decides otherwise
      (a zero-quantity product cannot be created but can be updated to zero)
    - Unparseable numbers on update are a type error (400), not a store error
"""

import math
import re
from uuid import UUID

from inventory.core.domain_types import (
    PRODUCT_FIELDS, UPDATABLE_FIELDS, ProductId,
)
from inventory.core.errors import ProductValidationError


_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"^\s*([+-]?)0[xX]([0-9a-fA-F]*)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def check_create_fields(payload: dict) -> None:
    """Reject a create body unless productName, quantity and price are all truthy."""
    missing = [name for name in PRODUCT_FIELDS if not payload.get(name)]
    if missing:
        raise ProductValidationError("Missing required fields", missing)


def check_update_fields(product_id: str | None, payload: dict) -> None:
    """Reject an update unless the id is present and quantity/price are non-null."""
    missing = [name for name in UPDATABLE_FIELDS if payload.get(name) is None]
    if not product_id:
        missing.insert(0, "id")
    if missing:
        raise ProductValidationError("Missing required fields", missing)


def check_product_id(product_id: str | None) -> None:
    if not product_id:
        raise ProductValidationError("Product ID is required", ["id"])


def to_product_id(raw: str) -> ProductId:
    """Convert an opaque identifier string to the store key. Malformed → ValueError."""
    return ProductId(UUID(raw))


def parse_int(value: object) -> int | None:
    """Leading integer of value, truncating floats toward zero. None if there is none."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    text = str(value)
    hex_match = _HEX_PREFIX.match(text)
    if hex_match:
        sign, digits = hex_match.groups()
        return int(sign + digits, 16) if digits else None
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def parse_float(value: object) -> float | None:
    """Leading decimal number of value. None if there is none or it is not finite."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if not match:
            return None
        result = float(match.group(1))
    return result if math.isfinite(result) else None


def coerce_update_fields(payload: dict) -> dict:
    """Build the {quantity: int, price: float} patch for an already-checked update body."""
    quantity = parse_int(payload["quantity"])
    price = parse_float(payload["price"])
    invalid = [
        name for name, value in (("quantity", quantity), ("price", price))
        if value is None
    ]
    if invalid:
        raise ProductValidationError("quantity and price must be numeric", invalid)
    return {"quantity": quantity, "price": price}
