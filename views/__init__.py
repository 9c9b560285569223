"""
Screens that present catalog, cart and checkout state.
"""

from views.screens import (
    Renderer,
    MainScreen,
    ProductDetailsScreen,
    CartScreen,
    CheckoutPaymentScreen,
    CheckoutContactScreen,
    SuccessScreen,
)

__all__ = [
    "Renderer",
    "MainScreen",
    "ProductDetailsScreen",
    "CartScreen",
    "CheckoutPaymentScreen",
    "CheckoutContactScreen",
    "SuccessScreen",
]
