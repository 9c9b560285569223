"""
Storefront domain layer.

- EventBus: named-channel pub/sub connecting model changes to screens
- Cart: the customer's in-progress order, publishing its changes
- CheckoutService: validates and submits the cart through the gateway
"""

from storefront.event_bus import EventBus, PublishedEvent
from storefront.events import AppEvents
from storefront.cart import Cart
from storefront.checkout import CheckoutService

__all__ = [
    "EventBus",
    "PublishedEvent",
    "AppEvents",
    "Cart",
    "CheckoutService",
]
