import math
from typing import Any, Dict

from .errors import ApiError

DEFAULT_CATEGORY = "Uncategorized"


def validate_product(payload: Any) -> Dict[str, Any]:
    """Presence/type checks for create and update bodies.

    Presence is truthiness, so a price of 0 is reported as missing.
    """
    body = payload if isinstance(payload, dict) else {}
    if not body.get("name") or not body.get("price"):
        raise ApiError.validation("Name and price are required")

    price = body["price"]
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ApiError.validation("Price must be a positive number")
    try:
        finite = math.isfinite(price)
    except OverflowError:
        # int too large for a float
        finite = False
    if not finite or price <= 0:
        raise ApiError.validation("Price must be a positive number")
    return body


def _make_product_dict(product_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": body["name"],
        "description": body.get("description") or "",
        "price": body["price"],
        "category": body.get("category") or DEFAULT_CATEGORY,
        "inStock": body["inStock"] if "inStock" in body else True,
    }


def _merge_product_dict(existing: Dict[str, Any], body: Dict[str, Any]) -> Dict[str, Any]:
    # Omitted optional fields fall back to the stored record, not to the create defaults.
    merged = dict(existing)
    merged.update({
        "name": body["name"],
        "description": body.get("description") or existing.get("description", ""),
        "price": body["price"],
        "category": body.get("category") or existing.get("category", DEFAULT_CATEGORY),
        "inStock": body["inStock"] if "inStock" in body else existing.get("inStock", True),
    })
    return merged
