"""Inventory filter tests — case-insensitive substring search by field selector.

Tests cover:
    - Name selector matches case-insensitively
    - Price selector matches the displayed number
    - All selector ORs across every field
    - Empty term returns every record in order
    - Whitespace-only term is a substring test across every field
    - Integral floats display without a trailing ".0"
    - Unknown selector hides nothing
    - Input list is not mutated
    - format_price renders two decimals
"""

from inventory.core.domain_types import SearchField
from inventory.core.filter_products import (
    display_value, filter_products, format_price,
)


BOLT = {"productName": "Bolt", "quantity": 10, "price": 1.5}
NUT = {"productName": "Nut", "quantity": 5, "price": 0.5}
PRODUCTS = [BOLT, NUT]


def test_name_selector_is_case_insensitive():
    assert filter_products(PRODUCTS, "bolt", SearchField.NAME) == [BOLT]


def test_price_selector_matches_displayed_price():
    assert filter_products(PRODUCTS, "0.5", SearchField.PRICE) == [NUT]


def test_quantity_selector_ignores_other_fields():
    assert filter_products(PRODUCTS, "5", SearchField.QUANTITY) == [NUT]


def test_all_selector_matches_any_field():
    # "5" appears in Nut's quantity and in both prices
    assert filter_products(PRODUCTS, "5", SearchField.ALL) == [BOLT, NUT]
    assert filter_products(PRODUCTS, "nu", SearchField.ALL) == [NUT]


def test_selector_accepts_plain_label():
    assert filter_products(PRODUCTS, "BOLT", "Name") == [BOLT]


def test_empty_term_returns_all_in_order():
    for selector in SearchField:
        assert filter_products(PRODUCTS, "", selector) == [BOLT, NUT]


def test_blank_term_is_matched_across_all_fields():
    hex_nut = {"productName": "Hex Nut", "quantity": 5, "price": 0.5}
    products = [BOLT, hex_nut]
    for selector in SearchField:
        assert filter_products(products, " ", selector) == [hex_nut]
    assert filter_products(products, "   ", SearchField.PRICE) == []


def test_no_match_returns_empty_list():
    assert filter_products(PRODUCTS, "washer", SearchField.ALL) == []


def test_unknown_selector_hides_nothing():
    assert filter_products(PRODUCTS, "zzz", "Supplier") == [BOLT, NUT]


def test_filter_does_not_mutate_input():
    products = [dict(BOLT), dict(NUT)]
    result = filter_products(products, "bolt", SearchField.NAME)
    result.append({"productName": "extra"})
    assert len(products) == 2


def test_integral_float_displays_without_decimal_part():
    assert display_value(2.0) == "2"
    assert filter_products(
        [{"productName": "Pin", "quantity": 1, "price": 2.0}], "2.0", SearchField.PRICE,
    ) == []


def test_missing_field_displays_as_empty():
    assert display_value(None) == ""
    assert filter_products([{"productName": "Pin"}], "1", SearchField.PRICE) == []


def test_format_price_two_decimals():
    assert format_price(1.5) == "$1.50"
    assert format_price(3) == "$3.00"
    assert format_price("n/a") == "n/a"
