#!/usr/bin/env python
import os

import requests

from sdk.pyproducts import ProductAPIError, ProductClient


def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY", "mysecretkey"),
    )

    print(c.welcome())

    # -----------------------------
    # List and filter
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nElectronics, page 2 of size 1...")
    print(c.list_products(category="Electronics", page=2, limit=1))

    print("\nSearching for 'phone'...")
    print(c.search_products("phone"))

    print("\nStats by category...")
    print(c.stats())

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating a product...")
    mouse = c.create_product("Mouse", "Wireless", 25, "electronics", True)
    print(mouse)

    print("\nUpdating it...")
    print(c.update_product(mouse["id"], "Mouse", "Wireless, rechargeable", 30, "electronics", False))

    print("\nDeleting it...")
    print(c.delete_product(mouse["id"]))

    # -----------------------------
    # Errors
    # -----------------------------
    print("\nFetching it again...")
    try:
        c.get_product(mouse["id"])
    except ProductAPIError as e:
        print(e)

    print("\nCreating without a price...")
    try:
        c.session.post(c.products_url, json={"name": "Broken", "description": "x"}).raise_for_status()
    except requests.exceptions.HTTPError as e:
        print(e)

    print("\nWithout an API key...")
    anonymous = ProductClient(base_url=c.base_url)
    try:
        anonymous.list_products()
    except ProductAPIError as e:
        print(e)


if __name__ == "__main__":
    main()
