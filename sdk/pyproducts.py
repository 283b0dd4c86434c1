# sdk/pyproducts.py
import requests
import httpx
from typing import Any, Dict, Optional

API_KEY_HEADER = "x-api-key"


class ProductAPIError(Exception):
    """Raised for any non-2xx answer; carries the server's ``error`` text."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


def _raise_for_error(r) -> None:
    if r.status_code < 400:
        return
    try:
        body = r.json()
    except ValueError:
        body = None
    # gateways and proxies do not always answer with an object
    message = body.get("error", r.text) if isinstance(body, dict) else r.text
    raise ProductAPIError(r.status_code, message)


class ProductClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        api_key: Optional[str] = None,
        timeout: int = 10,
        session=None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        # anything with requests' get/post/put/delete signature works here,
        # e.g. fastapi.testclient.TestClient
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.api_key = api_key
        self._async_transport = async_transport
        if api_key:
            self.session.headers.update({API_KEY_HEADER: api_key})

    @property
    def products_url(self) -> str:
        return f"{self.base_url}/api/products"

    def _product_body(self, name: str, description: str, price: float, category: str, in_stock: bool) -> Dict[str, Any]:
        return {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "inStock": in_stock,
        }

    def welcome(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        _raise_for_error(r)
        return r.text

    def list_products(self, category: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(self.products_url, params=params, timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    def search_products(self, name: str):
        r = self.session.get(f"{self.products_url}/search", params={"name": name}, timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    def stats(self) -> Dict[str, int]:
        r = self.session.get(f"{self.products_url}/stats", timeout=self.timeout)
        _raise_for_error(r)
        return r.json()["countByCategory"]

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.products_url}/{product_id}", timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        body = self._product_body(name, description, price, category, in_stock)
        r = self.session.post(self.products_url, json=body, timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    def update_product(self, product_id: str, name: str, description: str, price: float, category: str, in_stock: bool):
        body = self._product_body(name, description, price, category, in_stock)
        r = self.session.put(f"{self.products_url}/{product_id}", json=body, timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    def delete_product(self, product_id: str):
        r = self.session.delete(f"{self.products_url}/{product_id}", timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    # Async fetch (example)
    async def get_product_async(self, product_id: str):
        headers = {API_KEY_HEADER: self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=headers,
            transport=self._async_transport,
        ) as client:
            r = await client.get(f"/api/products/{product_id}")
            _raise_for_error(r)
            return r.json()

    async def create_product_async(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        headers = {API_KEY_HEADER: self.api_key} if self.api_key else {}
        body = self._product_body(name, description, price, category, in_stock)
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=headers,
            transport=self._async_transport,
        ) as client:
            r = await client.post("/api/products", json=body)
            _raise_for_error(r)
            return r.json()
