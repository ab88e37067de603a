# app/models.py
from pydantic import BaseModel
from typing import Any, Dict, List

class Product(BaseModel):
    id: str
    name: str
    description: str = ""
    price: float
    category: str = "Uncategorized"
    inStock: bool = True

class ProductPage(BaseModel):
    total: int
    page: int
    totalPages: int
    # Stored records are served as-is; optional fields are never coerced.
    data: List[Dict[str, Any]]

class ProductStats(BaseModel):
    totalProducts: int
    categories: Dict[str, int]
    inStock: int
    outOfStock: int
