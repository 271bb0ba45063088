"""Inventory View State — the UI's local copy of the collection and its form fields.

Invariants:
    - inventory always comes from a full server list; no optimistic inserts or splices
    - add/delete/save_edit re-fetch the list after a successful request
    - delete issues no request unless confirm() returns True
    - Network and API failures are logged, never raised; actions return True/False
    - visible() is the filtered view; it never mutates inventory

Design Decisions:
    - Re-fetch after delete (not a local splice): displayed state cannot drift from the store
    - Text inputs kept as strings and parsed on submit, like browser form fields
"""

import logging
from collections.abc import Callable

import httpx

from inventory.client.api_client import InventoryClient, InventoryClientError
from inventory.core.domain_types import SearchField
from inventory.core.filter_products import filter_products
from inventory.core.validate_product import parse_float, parse_int

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this product?"

_CLIENT_FAILURES = (InventoryClientError, httpx.HTTPError)


def _decline(prompt: str) -> bool:
    return False


class InventoryView:
    """Bridges UI actions to the four product operations."""

    def __init__(
        self,
        client: InventoryClient,
        confirm: Callable[[str], bool] = _decline,
    ):
        self.client = client
        self.confirm = confirm

        self.inventory: list[dict] = []

        # Add form
        self.product_name = ""
        self.quantity = ""
        self.price = ""

        # Search
        self.search_term = ""
        self.search_by: SearchField | str = SearchField.ALL

        # Edit mode
        self.editing_id: str | None = None
        self.edit_quantity = ""
        self.edit_price = ""

    async def mount(self) -> bool:
        """Fetch the full list and replace local state."""
        try:
            self.inventory = await self.client.list_products()
        except _CLIENT_FAILURES as e:
            logger.error(f"Error fetching data: {e}")
            return False
        logger.debug(f"Fetched {len(self.inventory)} products")
        return True

    async def add(self) -> bool:
        try:
            await self.client.create_product(
                self.product_name,
                parse_int(self.quantity),
                parse_float(self.price),
            )
        except _CLIENT_FAILURES as e:
            logger.error(f"Error adding product: {e}")
            return False
        self.product_name = ""
        self.quantity = ""
        self.price = ""
        await self.mount()
        return True

    async def delete(self, product_id: str) -> bool:
        if not self.confirm(DELETE_PROMPT):
            return False
        try:
            await self.client.delete_product(product_id)
        except _CLIENT_FAILURES as e:
            logger.error(f"Error deleting product: {e}")
            return False
        if self.editing_id == product_id:
            self.cancel_edit()
        await self.mount()
        return True

    def start_edit(self, product: dict) -> None:
        """Enter edit mode on a row, seeding the edit fields from its current values."""
        self.editing_id = product["_id"]
        self.edit_quantity = str(product.get("quantity", ""))
        self.edit_price = str(product.get("price", ""))

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.edit_quantity = ""
        self.edit_price = ""

    async def save_edit(self) -> bool:
        if self.editing_id is None:
            return False
        try:
            await self.client.update_product(
                self.editing_id,
                parse_int(self.edit_quantity),
                parse_float(self.edit_price),
            )
        except _CLIENT_FAILURES as e:
            logger.error(f"Error updating product: {e}")
            return False
        self.cancel_edit()
        await self.mount()
        return True

    def visible(self) -> list[dict]:
        return filter_products(self.inventory, self.search_term, self.search_by)
