"""
Shopping cart / order-in-progress aggregate.

The cart owns the products a customer has picked plus the checkout fields
(contact details, delivery address and payment method). Every change to the
item list is announced on the event bus so screens can re-render.

Key behaviours:
- Items keep insertion order and the same product may appear more than once
- Removing a product id removes every item with that id
- The total is recomputed on each call; an item without a price counts as 0
- Validity depends only on the checkout fields, never on the items
- Nothing here raises: invalid state is reported through ``validate()``
"""

import logging

from shared.models import ContactData, OrderSubmission, PaymentData, Product
from storefront.event_bus import EventBus
from storefront.events import AppEvents

logger = logging.getLogger("cart")


class Cart:
    """
    The customer's in-progress order.

    Example:
        bus = EventBus()
        cart = Cart(bus, name="Ann", email="ann@example.com",
                    phone="+1234567890", address="1 Main St",
                    payment_method="online")

        cart.add_item(product)      # publishes productAdded + cartUpdated
        cart.total()                # sum of prices
        cart.validate()             # True when every checkout field is filled
    """

    def __init__(
        self,
        event_bus: EventBus,
        name: str = "",
        email: str = "",
        phone: str = "",
        address: str = "",
        payment_method: str = "",
    ):
        """
        Initialize an empty cart.

        Args:
            event_bus: Bus the cart publishes its changes on
            name, email, phone, address: Contact and delivery details
            payment_method: Payment tag such as "online" or "cash"
        """
        self.event_bus = event_bus
        self.name = name
        self.email = email
        self.phone = phone
        self.address = address
        self.payment_method = payment_method
        self._items: list[Product] = []

    @property
    def items(self) -> list[Product]:
        """A copy of the items in insertion order."""
        return list(self._items)

    # =========================================================================
    # Item mutations (publish events)
    # =========================================================================

    def add_item(self, product: Product) -> None:
        self._items.append(product)
        logger.info(f"{product.title} added to cart")

        self.event_bus.publish(AppEvents.PRODUCT_ADDED, product)
        self._publish_updated()

    def remove_item(self, product_id: str) -> None:
        """
        Remove every item whose id equals ``product_id``.

        Subscribers are notified even when nothing matched.
        """
        before = len(self._items)
        self._items = [item for item in self._items if item.id != product_id]
        logger.info(f"Removed {before - len(self._items)} item(s) with id {product_id}")

        self.event_bus.publish(AppEvents.PRODUCT_REMOVED, product_id)
        self._publish_updated()

    def clear(self) -> None:
        self._items = []
        logger.info("Cart cleared")
        self._publish_updated()

    def _publish_updated(self) -> None:
        # Subscribers get their own list so later mutations don't leak into it
        self.event_bus.publish(AppEvents.CART_UPDATED, list(self._items))

    # =========================================================================
    # Queries
    # =========================================================================

    def total(self) -> float:
        return sum(item.price or 0 for item in self._items)

    def count(self) -> int:
        return len(self._items)

    def contains(self, product_id: str) -> bool:
        return any(item.id == product_id for item in self._items)

    def validate(self) -> bool:
        """True when name, email, phone, address and payment method are all set."""
        return all((self.name, self.email, self.phone, self.address, self.payment_method))

    # =========================================================================
    # Checkout fields (plain mutations, no events)
    # =========================================================================

    def set_payment_method(self, value: str) -> None:
        self.payment_method = value

    def update_contact(self, contact: ContactData) -> None:
        self.email = contact.email
        self.phone = contact.phone

    def update_payment(self, payment: PaymentData) -> None:
        self.payment_method = payment.payment_method
        self.address = payment.address

    def to_order(self) -> OrderSubmission:
        """Snapshot the cart as the order body sent to the backend."""
        return OrderSubmission(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            cart_items=self.items,
            payment_method=self.payment_method,
        )
