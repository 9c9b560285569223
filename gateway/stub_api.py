"""
Stub storefront backend for local development and tests.

Serves the two endpoints the ApiGateway talks to, backed by the JSON product
fixture in ``data/products.json``:
- GET  /product/        -> {"total": n, "items": [...]}
- GET  /product/{id}    -> a single product (404 if unknown)
- POST /order           -> {"id": ..., "total": ...}

Orders are rejected with 400 and ``{"error": message}`` when the cart is
empty, an item is unknown or has no price, or a contact field is missing.
The order total is computed from catalog prices, not from the prices the
client sent. Nothing is persisted.
"""

import json
import logging
from pathlib import Path
from typing import Optional
from uuid import uuid4

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from shared.catalog import Catalog
from shared.models import OrderResult, OrderSubmission, Product

logger = logging.getLogger("stub_api")

DEFAULT_PRODUCTS_FILE = Path(__file__).parent.parent / "data" / "products.json"

app = FastAPI(
    title="Storefront Stub API",
    description="In-memory product and order endpoints for developing the storefront client",
    version="1.0.0",
)

# Module-level catalog (swapped out by tests via reset_api_state)
_catalog: Optional[Catalog] = None


def load_products(path: Path = DEFAULT_PRODUCTS_FILE) -> list[Product]:
    """Load a JSON product fixture file."""
    if not path.exists():
        logger.warning(f"Product fixture not found: {path}")
        return []
    with open(path, "r", encoding="utf-8") as f:
        return [Product.model_validate(item) for item in json.load(f)]


def get_catalog() -> Catalog:
    """Get the catalog served by the API, loading the fixture on first use."""
    global _catalog
    if _catalog is None:
        _catalog = Catalog()
        _catalog.populate_catalog(load_products())
    return _catalog


def reset_api_state(catalog: Optional[Catalog] = None) -> None:
    """Reset API state (for testing)."""
    global _catalog
    _catalog = catalog


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/product/")
def list_products():
    products = get_catalog().get_catalog()
    return {
        "total": len(products),
        "items": [product.model_dump(mode="json") for product in products],
    }


@app.get("/product/{product_id}")
def get_product(product_id: str):
    product = get_catalog().get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product not found: {product_id}")
    return product.model_dump(mode="json")


@app.post("/order")
def create_order(order: OrderSubmission):
    """
    Accept an order and return its id and total.

    Validation mirrors what a real storefront backend checks before charging:
    contact details present, at least one item, and every item known and priced.
    """
    catalog = get_catalog()

    missing = [
        field for field in ("name", "email", "phone", "address", "payment_method")
        if not getattr(order, field)
    ]
    if missing:
        return _bad_request(f"Missing order fields: {', '.join(missing)}")

    if not order.cart_items:
        return _bad_request("No items in order")

    total = 0.0
    for item in order.cart_items:
        product = catalog.get_product(item.id)
        if product is None:
            return _bad_request(f"Product not found: {item.id}")
        if product.price is None:
            return _bad_request(f"Product is not for sale: {product.title}")
        total += product.price

    result = OrderResult(id=str(uuid4()), total=total)
    logger.info(f"Order {result.id} accepted: {len(order.cart_items)} items, total {total}")
    return result.model_dump(mode="json")


def _bad_request(message: str) -> JSONResponse:
    logger.info(f"Order rejected: {message}")
    return JSONResponse(status_code=400, content={"error": message})
