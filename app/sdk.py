import math
import re
import uuid
from typing import Optional, Dict, Any, List

from .core import validate_product, _make_product_dict, _merge_product_dict
from .database import STORE, _get_lock
from .errors import ApiError

# This file contains the core logic for all API endpoints.

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_int(raw: Optional[str], default: int) -> int:
    """Read the leading integer of a query value ("3", " 3", "3abc"); anything else, or < 1, is the default."""
    if raw is None:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    value = int(m.group(1))
    return value if value > 0 else default


def _matches_search(p: Dict[str, Any], term: str) -> bool:
    for field in ("name", "description"):
        value = p.get(field)
        if isinstance(value, str) and term in value.lower():
            return True
    return False


# Product reads
async def list_products_logic(category: Optional[str] = None, search: Optional[str] = None,
                              page: Optional[str] = None, limit: Optional[str] = None):
    result: List[Dict[str, Any]] = STORE.list_all()

    if category:
        result = [p for p in result if p.get("category") == category]

    if search:
        term = search.lower()
        result = [p for p in result if _matches_search(p, term)]

    page_no = _parse_int(page, DEFAULT_PAGE)
    per_page = _parse_int(limit, DEFAULT_LIMIT)
    start = (page_no - 1) * per_page
    end = page_no * per_page

    return {
        "total": len(result),
        "page": page_no,
        "totalPages": math.ceil(len(result) / per_page),
        "data": result[start:end],
    }

async def get_product_logic(product_id: str):
    p = STORE.find_by_id(product_id)
    if not p:
        raise ApiError.not_found()
    return p

async def product_stats_logic():
    products = STORE.list_all()
    categories: Dict[str, int] = {}
    in_stock = 0
    for p in products:
        category = str(p.get("category"))
        categories[category] = categories.get(category, 0) + 1
        if p.get("inStock"):
            in_stock += 1
    return {
        "totalProducts": len(products),
        "categories": categories,
        "inStock": in_stock,
        "outOfStock": len(products) - in_stock,
    }

# Product writes
async def create_product_logic(payload: Any):
    body = validate_product(payload)
    lock = _get_lock("products")
    await lock.acquire()
    try:
        product = _make_product_dict(str(uuid.uuid4()), body)
        STORE.append(product)
        return product
    finally:
        lock.release()

async def update_product_logic(product_id: str, payload: Any):
    body = validate_product(payload)
    lock = _get_lock("products")
    await lock.acquire()
    try:
        existing = STORE.find_by_id(product_id)
        if not existing:
            raise ApiError.not_found()
        return STORE.replace(product_id, _merge_product_dict(existing, body))
    finally:
        lock.release()

async def delete_product_logic(product_id: str):
    lock = _get_lock("products")
    await lock.acquire()
    try:
        STORE.remove_by_id(product_id)
    finally:
        lock.release()
