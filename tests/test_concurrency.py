# tests/test_concurrency.py
import asyncio

import httpx
from fastapi.testclient import TestClient

from app.database import STORE
from app.main import app
from conftest import AUTH

client = TestClient(app)

async def _create_task(ac, i):
    return await ac.post("/api/products", json={"name": f"Item {i}", "price": 1 + i}, headers=AUTH)

async def _create_many(n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*(_create_task(ac, i) for i in range(n)))

async def _create_and_delete():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(
            ac.delete("/api/products/1", headers=AUTH),
            ac.delete("/api/products/1", headers=AUTH),
        )

def test_concurrent_creates_get_distinct_ids():
    results = asyncio.run(_create_many(20))
    assert all(r.status_code == 201 for r in results)
    ids = {r.json()["id"] for r in results}
    assert len(ids) == 20
    assert len(STORE) == 22
    assert client.get("/api/products/stats").json()["totalProducts"] == 22

def test_concurrent_deletes_of_same_id():
    results = asyncio.run(_create_and_delete())
    statuses = sorted(r.status_code for r in results)
    # exactly one delete wins
    assert statuses == [204, 404]
