# tests/test_listing.py
from fastapi.testclient import TestClient

from app.main import app
from conftest import AUTH

client = TestClient(app)


def add(name, price=1.0, **fields):
    r = client.post("/api/products", json=dict(name=name, price=price, **fields), headers=AUTH)
    assert r.status_code == 201
    return r.json()


def test_list_defaults():
    body = client.get("/api/products").json()
    assert body["total"] == 2
    assert body["page"] == 1
    assert body["totalPages"] == 1
    assert [p["id"] for p in body["data"]] == ["1", "2"]


def test_second_page_of_one():
    body = client.get("/api/products", params={"limit": 1, "page": 2}).json()
    assert body == {
        "total": 2,
        "page": 2,
        "totalPages": 2,
        "data": [client.get("/api/products/2").json()],
    }


def test_out_of_range_page_is_empty():
    body = client.get("/api/products", params={"page": 9}).json()
    assert body["data"] == []
    assert body["total"] == 2
    assert body["page"] == 9


def test_bad_paging_values_fall_back_to_defaults():
    body = client.get("/api/products", params={"page": "abc", "limit": "zero"}).json()
    assert body["page"] == 1
    assert body["totalPages"] == 1
    body = client.get("/api/products", params={"page": "0", "limit": "-5"}).json()
    assert body["page"] == 1
    assert len(body["data"]) == 2


def test_paging_values_use_leading_digits():
    body = client.get("/api/products", params={"page": "2nd", "limit": "1px"}).json()
    assert body["page"] == 2
    assert [p["id"] for p in body["data"]] == ["2"]


def test_category_filter_is_exact():
    body = client.get("/api/products", params={"category": "Furniture"}).json()
    assert [p["name"] for p in body["data"]] == ["Desk Chair"]
    assert client.get("/api/products", params={"category": "furniture"}).json()["total"] == 0


def test_search_is_case_insensitive_on_name_or_description():
    add("Bookshelf", description="Solid OAK")
    assert [p["name"] for p in client.get("/api/products", params={"search": "LAPTOP"}).json()["data"]] == ["Laptop"]
    assert [p["name"] for p in client.get("/api/products", params={"search": "ergonomic"}).json()["data"]] == ["Desk Chair"]
    assert [p["name"] for p in client.get("/api/products", params={"search": "oak"}).json()["data"]] == ["Bookshelf"]


def test_category_and_search_combine():
    add("Gaming Chair", category="Furniture")
    add("Chair Mat", category="Accessories")
    body = client.get("/api/products", params={"category": "Furniture", "search": "chair"}).json()
    assert [p["name"] for p in body["data"]] == ["Desk Chair", "Gaming Chair"]
    assert body["total"] == 2


def test_total_pages_rounds_up():
    for i in range(3):
        add(f"Item {i}")
    body = client.get("/api/products", params={"limit": 2}).json()
    assert body["total"] == 5
    assert body["totalPages"] == 3


def test_empty_result_has_zero_pages():
    body = client.get("/api/products", params={"search": "nothing matches this"}).json()
    assert body == {"total": 0, "page": 1, "totalPages": 0, "data": []}


def test_stats_on_seed():
    r = client.get("/api/products/stats")
    assert r.status_code == 200
    assert r.json() == {
        "totalProducts": 2,
        "categories": {"Electronics": 1, "Furniture": 1},
        "inStock": 2,
        "outOfStock": 0,
    }


def test_stats_counts_and_category_order():
    add("Pen", category="Office", inStock=False)
    add("Lamp", category="Furniture")
    add("Thing")
    stats = client.get("/api/products/stats").json()
    assert stats["totalProducts"] == 5
    assert stats["inStock"] == 4
    assert stats["outOfStock"] == 1
    assert list(stats["categories"].items()) == [
        ("Electronics", 1), ("Furniture", 2), ("Office", 1), ("Uncategorized", 1)
    ]


def test_stats_route_wins_over_id_lookup():
    add("Stats Poster")
    r = client.get("/api/products/stats")
    assert "totalProducts" in r.json()
