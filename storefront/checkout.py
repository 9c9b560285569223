"""
Checkout flow: validate the cart, submit it, report the outcome.

This is the collaborator that interprets ``Cart.validate()`` and talks to the
gateway. Outcomes reach the screens through the event bus:
- success: the cart is cleared and ORDER_COMPLETED carries the OrderResult
- failure: ORDER_FAILED carries a user-facing message

Gateway errors never escape ``submit()``; they become a failed CheckoutResult.
"""

import logging

from gateway.client import ApiGateway, GatewayError
from shared.catalog import Catalog
from shared.models import CheckoutResult, ContactData, PaymentData
from storefront.cart import Cart
from storefront.event_bus import EventBus
from storefront.events import AppEvents

logger = logging.getLogger("checkout")

INCOMPLETE_DETAILS_MESSAGE = "Contact and payment details are incomplete"
EMPTY_CART_MESSAGE = "Cart is empty"


class CheckoutService:
    """
    Drives an order from cart to backend confirmation.

    Example:
        checkout = CheckoutService(cart=cart, gateway=gateway, event_bus=bus)
        checkout.apply_payment(PaymentData(payment_method="cash", address="1 Main St"))
        checkout.apply_contact(ContactData(email="ann@example.com", phone="+1234567890"))
        result = await checkout.submit()
    """

    def __init__(self, cart: Cart, gateway: ApiGateway, event_bus: EventBus):
        self.cart = cart
        self.gateway = gateway
        self.event_bus = event_bus

    async def load_catalog(self, catalog: Catalog) -> None:
        """Fetch products from the backend into ``catalog``."""
        products = await self.gateway.fetch_products()
        catalog.populate_catalog(products)

    def apply_contact(self, contact: ContactData) -> None:
        self.cart.update_contact(contact)

    def apply_payment(self, payment: PaymentData) -> None:
        self.cart.update_payment(payment)

    async def submit(self) -> CheckoutResult:
        """
        Submit the cart as an order.

        Returns:
            CheckoutResult with the order confirmation on success, or the
            error message shown to the customer on failure
        """
        if not self.cart.validate():
            return self._fail(INCOMPLETE_DETAILS_MESSAGE)

        if self.cart.count() == 0:
            return self._fail(EMPTY_CART_MESSAGE)

        order = self.cart.to_order()
        try:
            result = await self.gateway.submit_order(order)
        except GatewayError as e:
            return self._fail(f"Order could not be placed: {e.message}")

        logger.info(f"Order {result.id} completed, total {result.total}")
        self.cart.clear()
        self.event_bus.publish(AppEvents.ORDER_COMPLETED, result)
        return CheckoutResult(success=True, order=result)

    def _fail(self, message: str) -> CheckoutResult:
        logger.warning(f"Checkout failed: {message}")
        self.event_bus.publish(AppEvents.ORDER_FAILED, message)
        return CheckoutResult(success=False, error=message)
