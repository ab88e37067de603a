import asyncio
import os

from sdk.productclient import ProductClient, ProductApiError

async def create_one(client, i):
    try:
        p = await client.create_product_async(f"Widget {i}", 1.0 + i, category="Widgets")
        print(f"✅ created {p['name']} -> {p['id']}")
        return p
    except ProductApiError as e:
        print(f"❌ Widget {i} failed: {e}")
        return None

async def main():
    c = ProductClient(base_url="http://127.0.0.1:3000", api_key=os.getenv("API_KEY", "demo-key"))
    before = c.get_stats()["totalProducts"]

    print("\n⚡ Creating 20 products concurrently...")
    created = await asyncio.gather(*(create_one(c, i) for i in range(20)))
    created = [p for p in created if p]

    ids = {p["id"] for p in created}
    after = c.get_stats()
    print(f"\n📦 {len(created)} created, {len(ids)} distinct ids")
    print(f"📊 totalProducts {before} -> {after['totalProducts']}")
    print(f"🏷️ categories: {after['categories']}")

if __name__ == "__main__":
    asyncio.run(main())
