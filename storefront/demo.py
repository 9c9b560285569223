"""
Demonstration of the storefront client end to end.

Runs a full customer session against the stub backend, served in-process
through httpx's ASGI transport (no server needed):
1. Fetch the catalog and show it on the main screen
2. Add products to the cart, remove one, watch the cart screen re-render
3. Fill in payment and contact forms and submit the order
4. The success screen reacts to ORDER_COMPLETED
"""

import asyncio
from typing import Optional

import httpx

from gateway.client import ApiGateway, GatewayError
from gateway.stub_api import app as stub_app
from shared.catalog import Catalog
from shared.models import CheckoutResult, PaymentMethod
from shared.settings import StorefrontSettings, configure_logging
from storefront.cart import Cart
from storefront.checkout import CheckoutService
from storefront.event_bus import EventBus
from views.screens import (
    CartScreen,
    CheckoutContactScreen,
    CheckoutPaymentScreen,
    MainScreen,
    ProductDetailsScreen,
    SuccessScreen,
)

STUB_BASE_URL = "http://storefront.local"


async def run_checkout_demo(gateway: Optional[ApiGateway] = None) -> CheckoutResult:
    """
    Browse, fill the cart and check out.

    Args:
        gateway: Gateway to use. Defaults to one wired to the in-process stub backend.
    """
    print("\n" + "=" * 70)
    print("STOREFRONT DEMO: Browse, cart and checkout")
    print("=" * 70 + "\n")

    if gateway is None:
        client = httpx.AsyncClient(transport=httpx.ASGITransport(app=stub_app))
        gateway = ApiGateway(STUB_BASE_URL, client=client)
    else:
        client = None

    # The application root owns the bus and hands it to everyone else
    event_bus = EventBus()
    catalog = Catalog()
    cart = Cart(event_bus, name="Demo Customer")
    checkout = CheckoutService(cart=cart, gateway=gateway, event_bus=event_bus)

    main_screen = MainScreen()
    details_screen = ProductDetailsScreen()
    cart_screen = CartScreen()
    success_screen = SuccessScreen()
    cart_screen.attach(event_bus)
    success_screen.attach(event_bus)

    try:
        try:
            await checkout.load_catalog(catalog)
        except GatewayError as e:
            result = CheckoutResult(success=False, error=f"Catalog could not be loaded: {e.message}")
            success_screen.show_error_message(result.error)
        else:
            main_screen.show_products(catalog.get_catalog())
            result = await _shop_and_checkout(catalog, cart, checkout, details_screen)
    finally:
        cart_screen.detach()
        success_screen.detach()
        if client is not None:
            await client.aclose()

    print("\n" + "-" * 70)
    if result.success:
        print(f"RESULT: Order {result.order.id} placed, total {result.order.total:g}")
    else:
        print(f"RESULT: Checkout failed: {result.error}")
    print("-" * 70)

    return result


async def _shop_and_checkout(
    catalog: Catalog,
    cart: Cart,
    checkout: CheckoutService,
    details_screen: ProductDetailsScreen,
) -> CheckoutResult:
    """Fill the cart from the loaded catalog and submit the order."""
    print("-" * 70)
    print("ACTION: Adding products to the cart")
    print("-" * 70 + "\n")

    purchasable = [product for product in catalog.get_catalog() if product.is_purchasable]
    for product in purchasable[:3]:
        details_screen.show_product_details(product)
        cart.add_item(product)

    if len(purchasable) > 1:
        cart.remove_item(purchasable[1].id)

    print(f"\nCart total: {cart.total():g}\n")

    print("-" * 70)
    print("ACTION: Checking out")
    print("-" * 70 + "\n")

    payment_screen = CheckoutPaymentScreen(
        payment_method=PaymentMethod.ONLINE.value,
        address="123 Example Street",
    )
    payment_screen.show_payment_form()
    checkout.apply_payment(payment_screen.collect_payment_data())

    contact_screen = CheckoutContactScreen(email="example@example.com", phone="+1234567890")
    contact_screen.show_contact_form()
    checkout.apply_contact(contact_screen.collect_contact_data())

    return await checkout.submit()


def main() -> None:
    settings = StorefrontSettings.from_env()
    configure_logging(settings.log_level)
    asyncio.run(run_checkout_demo())


if __name__ == "__main__":
    main()
