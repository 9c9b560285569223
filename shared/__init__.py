"""
Shared building blocks for the storefront client.

This package contains code used by the domain layer, the gateway and the screens:
- Domain models (Product, OrderSubmission, OrderResult, ...)
- The passive product catalog
- Runtime settings and logging setup
"""

from shared.models import (
    Product,
    PaymentMethod,
    ContactData,
    PaymentData,
    OrderSubmission,
    OrderResult,
    CheckoutResult,
)
from shared.catalog import Catalog, DuplicateProductError
from shared.settings import StorefrontSettings, configure_logging

__all__ = [
    "Product",
    "PaymentMethod",
    "ContactData",
    "PaymentData",
    "OrderSubmission",
    "OrderResult",
    "CheckoutResult",
    "Catalog",
    "DuplicateProductError",
    "StorefrontSettings",
    "configure_logging",
]
