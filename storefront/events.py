"""
Event names published by the storefront domain layer.

Payloads by event:
- PRODUCT_ADDED: the Product that was added
- PRODUCT_REMOVED: the product id that was removed
- CART_UPDATED: a copy of the cart's item list after the change
- ORDER_COMPLETED: the OrderResult returned by the backend
- ORDER_FAILED: a user-facing error message
"""

from enum import Enum


class AppEvents(str, Enum):
    """
    Event names used on the bus.

    Members are strings, so they can be passed anywhere an event name is
    expected and compare equal to their raw values.
    """
    PRODUCT_ADDED = "productAdded"
    PRODUCT_REMOVED = "productRemoved"
    ORDER_COMPLETED = "orderCompleted"
    CART_UPDATED = "cartUpdated"
    ORDER_FAILED = "orderFailed"

    def __str__(self) -> str:
        return self.value
