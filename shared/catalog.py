"""
Product catalog container.

Holds the product snapshot most recently fetched from the storefront backend.
The catalog is passive: it never fetches on its own and never notifies anyone,
it just answers lookups for the screens and the cart.
"""

import logging
from typing import Iterable, Optional

from shared.models import Product

logger = logging.getLogger("catalog")


class DuplicateProductError(ValueError):
    """Raised when a catalog snapshot contains the same product id twice."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Duplicate product id in catalog: {product_id}")


class Catalog:
    """
    The currently known set of purchasable products.

    Example:
        catalog = Catalog()
        catalog.populate_catalog(products)
        product = catalog.get_product("p1")
    """

    def __init__(self):
        self._products: list[Product] = []
        self._by_id: dict[str, Product] = {}

    def get_catalog(self) -> list[Product]:
        """Return the products in the order they were provided."""
        return list(self._products)

    def populate_catalog(self, products: Iterable[Product]) -> None:
        """
        Replace the catalog with a new snapshot.

        Raises:
            DuplicateProductError: if two products share an id. The previous
                snapshot is kept in that case.
        """
        snapshot = list(products)
        by_id: dict[str, Product] = {}
        for product in snapshot:
            if product.id in by_id:
                raise DuplicateProductError(product.id)
            by_id[product.id] = product

        self._products = snapshot
        self._by_id = by_id
        logger.info(f"Catalog populated with {len(snapshot)} products")

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def __len__(self) -> int:
        return len(self._products)
