# sdk/productclient.py
import requests
import httpx
from typing import Any, Dict, Optional


class ProductApiError(Exception):
    """Raised for any non-2xx answer; carries the server's error body."""

    def __init__(self, status_code: int, message: str, error_type: str = "HTTPError"):
        super().__init__(f"{status_code} {error_type}: {message}")
        self.status_code = status_code
        self.message = message
        self.type = error_type


def _raise_for_error(r) -> None:
    # works for both requests.Response and httpx.Response
    if r.status_code < 400:
        return
    try:
        body = r.json()
    except ValueError:
        raise ProductApiError(r.status_code, r.text)
    err = body.get("error") if isinstance(body, dict) else None
    if not isinstance(err, dict):
        raise ProductApiError(r.status_code, r.text)
    raise ProductApiError(r.status_code, err.get("message", r.text), err.get("type", "HTTPError"))


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, api_key_header: str = "x-api-key"):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout
        self.headers: Dict[str, str] = {}
        if api_key:
            self.headers[api_key_header] = api_key
            self.session.headers.update(self.headers)

    def hello(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        _raise_for_error(r)
        return r.text

    # Reads
    def list_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        params = _list_params(category, search, page, limit)
        r = self.session.get(f"{self.base_url}/api/products", params=params, timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    async def list_products_async(self, category: Optional[str] = None, search: Optional[str] = None,
                                  page: Optional[int] = None, limit: Optional[int] = None):
        params = _list_params(category, search, page, limit)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(f"{self.base_url}/api/products", params=params)
            _raise_for_error(r)
            return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    def get_stats(self):
        r = self.session.get(f"{self.base_url}/api/products/stats", timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    # Writes (need an api_key)
    def create_product(self, name: str, price: float, description: Optional[str] = None,
                       category: Optional[str] = None, in_stock: Optional[bool] = None):
        payload = _product_payload(name, price, description, category, in_stock)
        r = self.session.post(f"{self.base_url}/api/products", json=payload, timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    async def create_product_async(self, name: str, price: float, description: Optional[str] = None,
                                   category: Optional[str] = None, in_stock: Optional[bool] = None):
        payload = _product_payload(name, price, description, category, in_stock)
        async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers) as client:
            r = await client.post(f"{self.base_url}/api/products", json=payload)
            _raise_for_error(r)
            return r.json()

    def update_product(self, product_id: str, name: str, price: float, description: Optional[str] = None,
                       category: Optional[str] = None, in_stock: Optional[bool] = None):
        payload = _product_payload(name, price, description, category, in_stock)
        r = self.session.put(f"{self.base_url}/api/products/{product_id}", json=payload, timeout=self.timeout)
        _raise_for_error(r)
        return r.json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        _raise_for_error(r)


def _list_params(category, search, page, limit) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if category:
        params["category"] = category
    if search:
        params["search"] = search
    if page:
        params["page"] = page
    if limit:
        params["limit"] = limit
    return params


def _product_payload(name, price, description, category, in_stock) -> Dict[str, Any]:
    # Only send what the caller set, so updates keep the stored values.
    payload: Dict[str, Any] = {"name": name, "price": price}
    if description is not None:
        payload["description"] = description
    if category is not None:
        payload["category"] = category
    if in_stock is not None:
        payload["inStock"] = in_stock
    return payload
