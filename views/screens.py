"""
Screen renderers for the storefront.

Every screen implements the same capability, ``render(content)``, on its own.
There is no shared base class. Rendering here means logging the content and
recording it in ``rendered`` so demos and tests can see what was shown.

Screens that react to model changes subscribe to the event bus through
``attach(bus)`` and unsubscribe with ``detach()``. The cart and checkout
never call a screen directly.
"""

import logging
from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import ContactData, OrderResult, PaymentData, PaymentMethod, Product
from storefront.event_bus import EventBus
from storefront.events import AppEvents

logger = logging.getLogger("views")

SUCCESS_MESSAGE = "Your order has been placed!"


@runtime_checkable
class Renderer(Protocol):
    """Anything that can draw content on screen."""

    def render(self, content: Any) -> None:
        ...


class MainScreen:
    """Storefront gallery listing the catalog."""

    def __init__(self):
        self.rendered: list[Any] = []

    def render(self, content: Any) -> None:
        self.rendered.append(content)
        logger.info(f"Main screen: {len(content)} products")

    def show_products(self, products: list[Product]) -> None:
        self.render(list(products))


class ProductDetailsScreen:
    """Single product preview."""

    def __init__(self):
        self.rendered: list[Any] = []

    def render(self, content: Any) -> None:
        self.rendered.append(content)
        logger.info(f"Product details: {content.title}")

    def show_product_details(self, product: Product) -> None:
        self.render(product)


class CartScreen:
    """
    Basket view.

    While attached, re-renders on every CART_UPDATED with the item list and
    the total computed from it.
    """

    def __init__(self):
        self.rendered: list[Any] = []
        self._bus: Optional[EventBus] = None

    def render(self, content: Any) -> None:
        self.rendered.append(content)
        logger.info(f"Cart: {len(content['items'])} items, total {content['total']}")

    def show_cart(self, items: list[Product]) -> None:
        self.render({
            "items": list(items),
            "total": sum(item.price or 0 for item in items),
        })

    def attach(self, bus: EventBus) -> None:
        self.detach()
        bus.subscribe(AppEvents.CART_UPDATED, self.show_cart)
        self._bus = bus

    def detach(self) -> None:
        if self._bus is not None:
            self._bus.unsubscribe(AppEvents.CART_UPDATED, self.show_cart)
            self._bus = None


class CheckoutPaymentScreen:
    """Payment method and delivery address form."""

    def __init__(
        self,
        payment_method: str = PaymentMethod.ONLINE.value,
        address: str = "",
    ):
        """
        Args:
            payment_method, address: Values the form returns when collected
                (stand-ins for what the customer types in)
        """
        self.rendered: list[Any] = []
        self.payment_method = payment_method
        self.address = address

    def render(self, content: Any) -> None:
        self.rendered.append(content)
        logger.info(f"Payment form: {content}")

    def show_payment_form(self) -> None:
        self.render("Choose a payment method and enter the delivery address")

    def collect_payment_data(self) -> PaymentData:
        return PaymentData(payment_method=self.payment_method, address=self.address)


class CheckoutContactScreen:
    """Email and phone form."""

    def __init__(self, email: str = "", phone: str = ""):
        self.rendered: list[Any] = []
        self.email = email
        self.phone = phone

    def render(self, content: Any) -> None:
        self.rendered.append(content)
        logger.info(f"Contact form: {content}")

    def show_contact_form(self) -> None:
        self.render("Enter your email and phone number")

    def collect_contact_data(self) -> ContactData:
        return ContactData(email=self.email, phone=self.phone)


class SuccessScreen:
    """
    Order outcome screen.

    While attached, shows the success message with the charged total on
    ORDER_COMPLETED, and the error message on ORDER_FAILED.
    """

    def __init__(self):
        self.rendered: list[Any] = []
        self._bus: Optional[EventBus] = None

    def render(self, content: Any) -> None:
        self.rendered.append(content)
        logger.info(f"Outcome: {content}")

    def show_success_message(self, result: Optional[OrderResult] = None) -> None:
        if result is None:
            self.render(SUCCESS_MESSAGE)
        else:
            self.render(f"{SUCCESS_MESSAGE} Charged {result.total:g}")

    def show_error_message(self, message: str) -> None:
        self.render(message)

    def attach(self, bus: EventBus) -> None:
        self.detach()
        bus.subscribe(AppEvents.ORDER_COMPLETED, self.show_success_message)
        bus.subscribe(AppEvents.ORDER_FAILED, self.show_error_message)
        self._bus = bus

    def detach(self) -> None:
        if self._bus is not None:
            self._bus.unsubscribe(AppEvents.ORDER_COMPLETED, self.show_success_message)
            self._bus.unsubscribe(AppEvents.ORDER_FAILED, self.show_error_message)
            self._bus = None
