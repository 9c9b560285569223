"""
Domain models for the storefront client.

These models describe the catalog items a customer can browse and the
payloads exchanged with the storefront backend when an order is placed.

Design decisions:
- Using Pydantic for validation and serialization
- Product ids are strings; numeric ids coming from an API are coerced
- Order payloads keep the backend's camelCase field names via aliases
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


# =============================================================================
# Enums
# =============================================================================

class PaymentMethod(str, Enum):
    """Payment options offered at checkout."""
    ONLINE = "online"
    CASH = "cash"


# =============================================================================
# Catalog
# =============================================================================

class Product(BaseModel):
    """
    A catalog item.

    Every field except ``price`` is fixed once the product is built. The price
    may be revised (e.g. by a pricing update), and ``None`` means the price is
    unknown and the product cannot be bought.
    """
    id: str = Field(..., frozen=True, description="Unique product identifier")
    title: str = Field(..., min_length=1, frozen=True, description="Display name")
    description: str = Field(default="", frozen=True)
    image: str = Field(default="", frozen=True, description="Image URI")
    category: str = Field(default="", frozen=True)
    price: Optional[float] = Field(
        default=None,
        ge=0,
        description="Current price, None when not purchasable"
    )

    model_config = ConfigDict(coerce_numbers_to_str=True, validate_assignment=True)

    @property
    def is_purchasable(self) -> bool:
        return self.price is not None


# =============================================================================
# Checkout forms
# =============================================================================

class ContactData(BaseModel):
    """Contact details collected on the checkout contact screen."""
    email: str = Field(default="")
    phone: str = Field(default="")


class PaymentData(BaseModel):
    """Payment method and delivery address collected on the payment screen."""
    payment_method: str = Field(default=PaymentMethod.ONLINE.value, alias="paymentMethod")
    address: str = Field(default="")

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Order submission
# =============================================================================

class OrderSubmission(BaseModel):
    """
    The order body sent to the storefront backend.

    Serialize with ``to_payload()`` so the JSON uses the backend's field
    names: name, email, phone, address, cartItems, paymentMethod.
    """
    name: str
    email: str
    phone: str
    address: str
    cart_items: list[Product] = Field(default_factory=list, alias="cartItems")
    payment_method: str = Field(..., alias="paymentMethod")

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """JSON-ready dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class OrderResult(BaseModel):
    """Confirmation returned by the backend for an accepted order."""
    id: str
    total: float

    model_config = ConfigDict(coerce_numbers_to_str=True)


class CheckoutResult(BaseModel):
    """Outcome of a checkout attempt, as reported to the caller."""
    success: bool
    order: Optional[OrderResult] = None
    error: Optional[str] = None
