# tests/test_client.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.main import WELCOME_MESSAGE, create_app
from sdk.pyproducts import ProductAPIError, ProductClient

API_KEY = "test-key"


def make_client(api_key=API_KEY):
    app = create_app(Settings(api_key=api_key))
    return ProductClient(base_url="http://testserver", api_key=api_key, session=TestClient(app)), app


def test_client_walks_every_endpoint():
    c, _ = make_client()
    assert c.welcome() == WELCOME_MESSAGE

    page = c.list_products(category="electronics", page=1, limit=1)
    assert page["total"] == 2
    assert [p["name"] for p in page["products"]] == ["Laptop"]

    assert c.search_products("maker")["total"] == 1
    assert c.stats() == {"electronics": 2, "kitchen": 1}

    mouse = c.create_product("Mouse", "Wireless", 25, "electronics", True)
    assert c.get_product(mouse["id"]) == mouse

    updated = c.update_product(mouse["id"], "Mouse", "Wired", 20, "electronics", False)
    assert updated["description"] == "Wired"
    assert updated["inStock"] is False

    deleted = c.delete_product(mouse["id"])
    assert deleted == {"message": "Product deleted", "product": updated}


def test_client_raises_with_server_message():
    c, _ = make_client()
    with pytest.raises(ProductAPIError) as exc:
        c.get_product("missing")
    assert exc.value.status_code == 404
    assert exc.value.message == "Product not found"

    with pytest.raises(ProductAPIError) as exc:
        c.create_product("Mouse", "Wireless", -3, "electronics", True)
    assert exc.value.status_code == 400
    assert exc.value.message == "Price is required and must be a positive number"


def test_client_without_key_is_rejected():
    app = create_app(Settings(api_key=API_KEY))
    c = ProductClient(base_url="http://testserver", session=TestClient(app))
    with pytest.raises(ProductAPIError) as exc:
        c.list_products()
    assert exc.value.status_code == 401


def test_async_helpers():
    _, app = make_client()
    c = ProductClient(base_url="http://test", api_key=API_KEY, async_transport=httpx.ASGITransport(app=app))

    async def scenario():
        created = await c.create_product_async("Mouse", "Wireless", 25, "electronics")
        fetched = await c.get_product_async(created["id"])
        return created, fetched

    created, fetched = asyncio.run(scenario())
    assert created == fetched
    assert fetched["inStock"] is True


@pytest.mark.parametrize("content", [b'["bad gateway"]', b'"bad gateway"', b"<html>bad gateway</html>"])
def test_error_body_that_is_not_an_object(content):
    def handler(request):
        return httpx.Response(502, content=content, headers={"content-type": "application/json"})

    c = ProductClient(base_url="http://test", api_key=API_KEY, session=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(ProductAPIError) as exc:
        c.get_product("1")
    assert exc.value.status_code == 502
    assert exc.value.message == content.decode()
