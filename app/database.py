import asyncio
import copy
from typing import Dict, Any, List, Optional

from .errors import ApiError

# This file holds the in-memory product store and the mutation lock.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop",
        "price": 999.99,
        "category": "Electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Desk Chair",
        "description": "Ergonomic office chair",
        "price": 199.99,
        "category": "Furniture",
        "inStock": True,
    },
]


class ProductStore:
    """Ordered in-memory product records. Callers serialize writes with _get_lock("products")."""

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None):
        self._seed = seed if seed is not None else SEED_PRODUCTS
        self._products: List[Dict[str, Any]] = []
        self.reset()

    def reset(self) -> None:
        self._products = copy.deepcopy(self._seed)

    def __len__(self) -> int:
        return len(self._products)

    def list_all(self) -> List[Dict[str, Any]]:
        return list(self._products)

    def find_by_id(self, product_id: str) -> Optional[Dict[str, Any]]:
        for p in self._products:
            if p["id"] == product_id:
                return p
        return None

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        raise ApiError.not_found()

    def append(self, product: Dict[str, Any]) -> None:
        self._products.append(product)

    def replace(self, product_id: str, product: Dict[str, Any]) -> Dict[str, Any]:
        index = self._index_of(product_id)
        self._products[index] = product
        return product

    def remove_by_id(self, product_id: str) -> None:
        index = self._index_of(product_id)
        del self._products[index]


STORE = ProductStore()
_LOCKS: Dict[str, asyncio.Lock] = {}

def _get_lock(key: str) -> asyncio.Lock:
    if key not in _LOCKS:
        _LOCKS[key] = asyncio.Lock()
    return _LOCKS[key]
