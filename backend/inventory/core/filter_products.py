"""Inventory Filter — selects which product records are visible for a search term.

Invariants:
    - filter_products is PURE and order-preserving: returns a new list, never mutates input
    - Matching is a case-insensitive substring test on each field's display string
    - Empty term matches every record; a whitespace-only term is tested as a
      substring across all fields whatever the selector
    - SearchField.ALL ORs across productName, quantity and price

Design Decisions:
    - Numbers stringified the way the browser table renders them (2.0 → "2"),
      so a term typed from the screen matches the stored value
    - Unknown selectors fall through to "match everything" rather than hiding rows
"""

from inventory.core.domain_types import (
    NAME_FIELD, PRICE_FIELD, QUANTITY_FIELD, SearchField,
)


_FIELDS_BY_SELECTOR: dict[SearchField, tuple[str, ...]] = {
    SearchField.ALL: (NAME_FIELD, QUANTITY_FIELD, PRICE_FIELD),
    SearchField.NAME: (NAME_FIELD,),
    SearchField.QUANTITY: (QUANTITY_FIELD,),
    SearchField.PRICE: (PRICE_FIELD,),
}


def display_value(value: object) -> str:
    """String form of a document field as the table shows it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_price(value: object) -> str:
    """Price cell text: dollar sign and two decimals."""
    try:
        return f"${float(value):.2f}"
    except (TypeError, ValueError):
        return display_value(value)


def _resolve_selector(search_by: SearchField | str) -> SearchField | None:
    try:
        return SearchField(search_by)
    except ValueError:
        return None


def matches(product: dict, term: str, search_by: SearchField | str) -> bool:
    """True if the product is visible for term under the given selector."""
    if not term:
        return True
    needle = term.lower()
    # Blank-but-not-empty terms are tested against every field
    selector = SearchField.ALL if not term.strip() else _resolve_selector(search_by)
    if selector is None:
        return True
    return any(
        needle in display_value(product.get(name)).lower()
        for name in _FIELDS_BY_SELECTOR[selector]
    )


def filter_products(
    products: list[dict],
    term: str,
    search_by: SearchField | str = SearchField.ALL,
) -> list[dict]:
    """Subset of products matching term, in original order."""
    return [p for p in products if matches(p, term, search_by)]
