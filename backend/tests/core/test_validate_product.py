"""Product validation tests — create truthiness, update null-check, numeric coercion.

Tests cover:
    - Create rejects missing, empty, zero and None fields (truthiness)
    - Update accepts quantity=0 / price=0 but rejects None (null-check)
    - Missing id reported on update and delete
    - parse_int / parse_float read a leading number from text
    - coerce_update_fields rejects non-numeric values
    - to_product_id raises ValueError on malformed ids

Design Decisions:
    - Pure core functions: no fixtures, just data in → data out
"""

import uuid

import pytest

from inventory.core.errors import ProductValidationError
from inventory.core.validate_product import (
    check_create_fields, check_product_id, check_update_fields,
    coerce_update_fields, parse_float, parse_int, to_product_id,
)


def _candidate(**overrides) -> dict:
    data = {"productName": "Bolt", "quantity": 10, "price": 1.5}
    data.update(overrides)
    return data


# ─── Create ──────────────────────────────────────────────────────

def test_create_accepts_complete_candidate():
    check_create_fields(_candidate())


@pytest.mark.parametrize("field", ["productName", "quantity", "price"])
def test_create_rejects_missing_field(field):
    data = _candidate()
    del data[field]
    with pytest.raises(ProductValidationError) as exc:
        check_create_fields(data)
    assert exc.value.fields == [field]
    assert exc.value.http_status == 400


@pytest.mark.parametrize(
    "overrides",
    [{"productName": ""}, {"quantity": 0}, {"price": 0}, {"price": None}],
)
def test_create_rejects_falsy_values_including_zero(overrides):
    with pytest.raises(ProductValidationError):
        check_create_fields(_candidate(**overrides))


def test_create_reports_every_missing_field():
    with pytest.raises(ProductValidationError) as exc:
        check_create_fields({})
    assert exc.value.fields == ["productName", "quantity", "price"]
    assert exc.value.message == "Missing required fields"


# ─── Update ──────────────────────────────────────────────────────

def test_update_accepts_zero_quantity_and_price():
    check_update_fields("some-id", {"quantity": 0, "price": 0})


def test_update_rejects_null_quantity():
    with pytest.raises(ProductValidationError) as exc:
        check_update_fields("some-id", {"quantity": None, "price": 2})
    assert exc.value.fields == ["quantity"]


def test_update_rejects_missing_id():
    with pytest.raises(ProductValidationError) as exc:
        check_update_fields(None, {"quantity": 1, "price": 2})
    assert exc.value.fields == ["id"]


def test_delete_requires_id():
    with pytest.raises(ProductValidationError) as exc:
        check_product_id("")
    assert exc.value.message == "Product ID is required"


# ─── Coercion ────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw, expected",
    [(7, 7), ("12", 12), (" 42 ", 42), ("3.9", 3), (3.9, 3), (-2.5, -2),
     ("12abc", 12), ("abc", None), ("", None), (None, None), (True, None),
     ("0x10", 16), (" -0X1f", -31), ("0x", None), ("0xzz", None)],
)
def test_parse_int_reads_leading_integer(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [(1.5, 1.5), (2, 2.0), ("0.5", 0.5), (".25", 0.25), ("1e2", 100.0),
     ("9.99 USD", 9.99), ("USD", None), ("", None), (float("nan"), None)],
)
def test_parse_float_reads_leading_number(raw, expected):
    assert parse_float(raw) == expected


def test_coerce_update_fields_converts_types():
    patch = coerce_update_fields({"quantity": "8", "price": "2"})
    assert patch == {"quantity": 8, "price": 2.0}
    assert isinstance(patch["quantity"], int)
    assert isinstance(patch["price"], float)


def test_coerce_update_fields_rejects_non_numeric():
    with pytest.raises(ProductValidationError) as exc:
        coerce_update_fields({"quantity": "lots", "price": 1})
    assert exc.value.fields == ["quantity"]


def test_to_product_id_round_trips_uuid_string():
    key = uuid.uuid4()
    assert to_product_id(str(key)) == key


def test_to_product_id_rejects_malformed_id():
    with pytest.raises(ValueError):
        to_product_id("not-an-id")
