"""
Shared pytest fixtures for the storefront client tests.

These fixtures provide consistent test data and fresh state for every test.
"""

import pytest
from pathlib import Path

from gateway.stub_api import load_products, reset_api_state
from shared.catalog import Catalog
from shared.models import Product
from storefront.cart import Cart
from storefront.event_bus import EventBus


@pytest.fixture
def data_dir() -> Path:
    """Path to the fixture data directory."""
    return Path(__file__).parent.parent / "data"


@pytest.fixture
def event_bus() -> EventBus:
    """Fresh event bus for each test."""
    return EventBus()


# =============================================================================
# Product Fixtures
# =============================================================================

@pytest.fixture
def priced_product() -> Product:
    """Product p1 with a price of 10."""
    return Product(
        id="p1",
        title="Test Product",
        description="A product with a price",
        image="/p1.svg",
        category="testing",
        price=10,
    )


@pytest.fixture
def unpriced_product() -> Product:
    """Product p2 with no price (not purchasable)."""
    return Product(
        id="p2",
        title="Priceless Product",
        description="",
        image="/p2.svg",
        category="testing",
        price=None,
    )


@pytest.fixture
def other_product() -> Product:
    """Product p3 with a price of 2.5."""
    return Product(id="p3", title="Cheap Product", price=2.5)


# =============================================================================
# Cart Fixtures
# =============================================================================

@pytest.fixture
def cart(event_bus: EventBus) -> Cart:
    """Empty cart with every checkout field filled in."""
    return Cart(
        event_bus,
        name="Alice",
        email="alice@example.com",
        phone="+1234567890",
        address="123 Example Street",
        payment_method="online",
    )


# =============================================================================
# Stub Backend Fixtures
# =============================================================================

@pytest.fixture
def fixture_products(data_dir: Path) -> list[Product]:
    """Products from data/products.json."""
    return load_products(data_dir / "products.json")


@pytest.fixture
def stub_catalog(fixture_products: list[Product]):
    """Catalog served by the stub API, reset after the test."""
    catalog = Catalog()
    catalog.populate_catalog(fixture_products)
    reset_api_state(catalog)
    yield catalog
    reset_api_state(None)
