"""Inventory API Client — async httpx wrapper around the four product operations.

Invariants:
    - One httpx.AsyncClient per InventoryClient; closed by aclose() / async with
    - Non-2xx responses raise InventoryClientError carrying the server "message"
    - A 2xx body that is not a JSON object also raises InventoryClientError
    - Identifiers travel as the ?id= query parameter, bodies as JSON

Design Decisions:
    - transport parameter lets tests route requests straight into the ASGI app
    - Timeout from settings: the UI should not hang on a stalled store
"""

import logging

import httpx

from inventory.config import get_settings

logger = logging.getLogger(__name__)

PRODUCT_PATH = "/api/product"


class InventoryClientError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def build_async_client(
    base_url: str | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout_seconds: float | None = None,
) -> httpx.AsyncClient:
    """Create an httpx.AsyncClient pointed at the inventory API."""
    settings = get_settings()
    return httpx.AsyncClient(
        base_url=base_url or settings.api_base_url,
        transport=transport,
        timeout=httpx.Timeout(timeout_seconds or settings.api_timeout_seconds),
        headers={"Content-Type": "application/json"},
    )


class InventoryClient:
    """List/create/update/delete products over HTTP."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._http = http_client or build_async_client(base_url, transport=transport)

    async def __aenter__(self) -> "InventoryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self, method: str, *, params: dict | None = None, json: dict | None = None,
    ) -> dict:
        response = await self._http.request(
            method, PRODUCT_PATH, params=params, json=json,
        )
        try:
            data = response.json()
        except ValueError:
            data = None
        body = data if isinstance(data, dict) else {}
        if response.is_error:
            raise InventoryClientError(
                response.status_code,
                body.get("message") or response.reason_phrase,
            )
        if data is not body:
            raise InventoryClientError(
                response.status_code, "Response body is not a JSON object",
            )
        return body

    async def list_products(self) -> list[dict]:
        data = await self._request("GET")
        return data.get("products", [])

    async def create_product(
        self, product_name: str, quantity: int | None, price: float | None,
    ) -> dict:
        """POST a candidate record; returns the stored document."""
        data = await self._request(
            "POST",
            json={"productName": product_name, "quantity": quantity, "price": price},
        )
        return data.get("data", {})

    async def update_product(
        self, product_id: str, quantity: int | None, price: float | None,
    ) -> str:
        data = await self._request(
            "PUT",
            params={"id": product_id},
            json={"quantity": quantity, "price": price},
        )
        return data.get("message", "")

    async def delete_product(self, product_id: str) -> str:
        data = await self._request("DELETE", params={"id": product_id})
        return data.get("message", "")
