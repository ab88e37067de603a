# app/main.py
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import Body, Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .auth import require_api_key
from .config import settings
from .errors import install_error_handlers
from .logger import get_logger
from .models import Product, ProductPage, ProductStats
from .sdk import (
    list_products_logic, get_product_logic, product_stats_logic,
    create_product_logic, update_product_logic, delete_product_logic,
)

logger = get_logger("api")

app = FastAPI(title="product-api (in-memory catalog)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

# ---------------------------
# Request logging
# ---------------------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    url = request.url.path
    if request.url.query:
        url += f"?{request.url.query}"
    logger.info("[%s] %s %s", datetime.now(timezone.utc).isoformat(), request.method, url)
    return await call_next(request)

# ---------------------------
# Root
# ---------------------------
@app.get("/", response_class=PlainTextResponse)
async def hello():
    return "Hello World!"

# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/api/products", response_model=ProductPage)
async def list_products(category: Optional[str] = None, search: Optional[str] = None,
                        page: Optional[str] = None, limit: Optional[str] = None):
    return await list_products_logic(category, search, page, limit)

# Must stay above /api/products/{product_id}, or "stats" is taken for an id.
@app.get("/api/products/stats", response_model=ProductStats)
async def product_stats():
    return await product_stats_logic()

@app.get("/api/products/{product_id}", responses={200: {"model": Product}})
async def get_product(product_id: str):
    return await get_product_logic(product_id)

@app.post("/api/products", status_code=201, responses={201: {"model": Product}},
          dependencies=[Depends(require_api_key)])
async def create_product(payload: Any = Body(None)):
    return await create_product_logic(payload)

@app.put("/api/products/{product_id}", responses={200: {"model": Product}},
         dependencies=[Depends(require_api_key)])
async def update_product(product_id: str, payload: Any = Body(None)):
    return await update_product_logic(product_id, payload)

@app.delete("/api/products/{product_id}", status_code=204, dependencies=[Depends(require_api_key)])
async def delete_product(product_id: str):
    await delete_product_logic(product_id)
    return Response(status_code=204)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
