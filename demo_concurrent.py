import asyncio
import os

from sdk.pyproducts import ProductAPIError, ProductClient


async def create_one(client, n):
    try:
        p = await client.create_product_async(f"Cable #{n}", "USB-C cable", 9.99, "accessories", True)
        print(f"✅ created {p['name']} ({p['id']})")
        return p
    except ProductAPIError as e:
        print(f"❌ create #{n} failed: {e}")
        return None


async def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY", "mysecretkey"),
    )
    before = c.list_products()["total"]

    # Run concurrent creates
    print("\n⚡ Creating 10 products concurrently...")
    created = await asyncio.gather(*(create_one(c, n) for n in range(10)))
    ids = {p["id"] for p in created if p}

    # Show final state
    after = c.list_products()["total"]
    print(f"\n📦 {before} -> {after} products, {len(ids)} distinct new ids")
    print("📊 Stats:", c.stats())

    for pid in ids:
        c.delete_product(pid)


if __name__ == "__main__":
    asyncio.run(main())
