"""
Tests for the cart aggregate.

These tests verify item bookkeeping, totals, validation and the events the
cart publishes for the screens.
"""

import pytest

from shared.models import ContactData, PaymentData, Product
from storefront.cart import Cart
from storefront.event_bus import EventBus
from storefront.events import AppEvents


@pytest.fixture
def recorded(event_bus: EventBus) -> list[tuple]:
    """Every cart event as (name, payload) in publish order."""
    events = []
    for name in (AppEvents.PRODUCT_ADDED, AppEvents.PRODUCT_REMOVED, AppEvents.CART_UPDATED):
        event_bus.subscribe(name, lambda payload, name=name: events.append((name, payload)))
    return events


class TestCartItems:
    """Tests for adding, removing and clearing items."""

    def test_new_cart_is_empty(self, cart: Cart):
        assert cart.items == []
        assert cart.count() == 0
        assert cart.total() == 0

    def test_add_item_preserves_order(self, cart: Cart, priced_product, unpriced_product, other_product):
        cart.add_item(other_product)
        cart.add_item(priced_product)
        cart.add_item(unpriced_product)

        assert [item.id for item in cart.items] == ["p3", "p1", "p2"]

    def test_add_same_product_twice(self, cart: Cart, priced_product):
        """Duplicates are kept, not merged."""
        cart.add_item(priced_product)
        cart.add_item(priced_product)

        assert cart.count() == 2
        assert cart.total() == 20

    def test_remove_item_removes_every_occurrence(self):
        """[A(1), B(2), A'(1)] minus id 1 leaves [B]."""
        cart = Cart(EventBus())
        a = Product(id="1", title="A", price=1)
        b = Product(id="2", title="B", price=2)
        a_again = Product(id="1", title="A again", price=3)

        cart.add_item(a)
        cart.add_item(b)
        cart.add_item(a_again)
        cart.remove_item("1")

        assert cart.items == [b]

    def test_remove_unknown_id_leaves_items(self, cart: Cart, priced_product):
        cart.add_item(priced_product)

        cart.remove_item("missing")

        assert cart.items == [priced_product]

    def test_clear(self, cart: Cart, priced_product, other_product):
        cart.add_item(priced_product)
        cart.add_item(other_product)

        cart.clear()

        assert cart.items == []
        assert cart.count() == 0
        assert cart.total() == 0

    def test_items_is_a_copy(self, cart: Cart, priced_product):
        cart.items.append(priced_product)

        assert cart.count() == 0

    def test_contains(self, cart: Cart, priced_product):
        cart.add_item(priced_product)

        assert cart.contains("p1")
        assert not cart.contains("p2")


class TestCartTotal:
    """Tests for total computation."""

    def test_unpriced_item_counts_as_zero(self, cart: Cart, priced_product, unpriced_product):
        """Concrete scenario: p1 (10) + p2 (no price) = 10; drop p1 -> 0."""
        cart.add_item(priced_product)
        cart.add_item(unpriced_product)
        assert cart.total() == 10

        cart.remove_item("p1")

        assert cart.total() == 0
        assert [item.id for item in cart.items] == ["p2"]

    def test_total_reflects_price_revision(self, cart: Cart, priced_product):
        """Total is recomputed on demand, never cached."""
        cart.add_item(priced_product)
        assert cart.total() == 10

        priced_product.price = 15

        assert cart.total() == 15

    def test_total_independent_of_order(self, priced_product, other_product, unpriced_product):
        first = Cart(EventBus())
        second = Cart(EventBus())

        for product in (priced_product, other_product, unpriced_product):
            first.add_item(product)
        for product in (unpriced_product, other_product, priced_product):
            second.add_item(product)

        assert first.total() == second.total() == 12.5


class TestCartEvents:
    """Tests for events published by cart mutations."""

    def test_add_item_publishes_added_then_updated(self, cart: Cart, recorded, priced_product):
        cart.add_item(priced_product)

        assert recorded == [
            (AppEvents.PRODUCT_ADDED, priced_product),
            (AppEvents.CART_UPDATED, [priced_product]),
        ]

    def test_remove_item_publishes_removed_then_updated(self, cart: Cart, recorded, priced_product, other_product):
        cart.add_item(priced_product)
        cart.add_item(other_product)
        recorded.clear()

        cart.remove_item("p1")

        assert recorded == [
            (AppEvents.PRODUCT_REMOVED, "p1"),
            (AppEvents.CART_UPDATED, [other_product]),
        ]

    def test_remove_unknown_id_still_notifies(self, cart: Cart, recorded):
        cart.remove_item("missing")

        assert recorded == [
            (AppEvents.PRODUCT_REMOVED, "missing"),
            (AppEvents.CART_UPDATED, []),
        ]

    def test_clear_publishes_empty_list(self, cart: Cart, recorded, priced_product):
        cart.add_item(priced_product)
        recorded.clear()

        cart.clear()

        assert recorded == [(AppEvents.CART_UPDATED, [])]

    def test_payload_not_affected_by_later_mutation(self, cart: Cart, recorded, priced_product, other_product):
        cart.add_item(priced_product)
        first_payload = recorded[-1][1]

        cart.add_item(other_product)

        assert first_payload == [priced_product]

    def test_duplicate_subscriber_called_twice_per_add(self, cart: Cart, event_bus: EventBus, priced_product):
        """Same callback subscribed twice runs twice, in order with other subscribers."""
        calls = []

        def twice(items):
            calls.append("twice")

        event_bus.subscribe(AppEvents.CART_UPDATED, twice)
        event_bus.subscribe(AppEvents.CART_UPDATED, lambda items: calls.append("other"))
        event_bus.subscribe(AppEvents.CART_UPDATED, twice)

        cart.add_item(priced_product)

        assert calls == ["twice", "other", "twice"]

    def test_failing_subscriber_does_not_block_others(self, cart: Cart, event_bus: EventBus, priced_product):
        received = []

        def broken(items):
            raise RuntimeError("render failed")

        event_bus.subscribe(AppEvents.CART_UPDATED, broken)
        event_bus.subscribe(AppEvents.CART_UPDATED, lambda items: received.append(items))

        cart.add_item(priced_product)

        assert received == [[priced_product]]
        assert cart.items == [priced_product]

    def test_set_payment_method_publishes_nothing(self, cart: Cart, event_bus: EventBus):
        cart.set_payment_method("cash")

        assert cart.payment_method == "cash"
        assert event_bus.get_event_log() == []


class TestCartValidation:
    """Tests for checkout field validation."""

    def test_valid_when_all_fields_set(self, cart: Cart):
        assert cart.validate() is True

    @pytest.mark.parametrize("field", ["name", "email", "phone", "address", "payment_method"])
    def test_any_empty_field_invalidates(self, cart: Cart, field: str):
        setattr(cart, field, "")

        assert cart.validate() is False

    def test_items_do_not_affect_validity(self, cart: Cart, priced_product):
        assert cart.validate() is True
        cart.add_item(priced_product)
        assert cart.validate() is True

        incomplete = Cart(EventBus(), name="Bob")
        incomplete.add_item(priced_product)
        assert incomplete.validate() is False

    def test_validate_has_no_side_effects(self, cart: Cart, event_bus: EventBus):
        cart.validate()

        assert event_bus.get_event_log() == []

    def test_update_contact_and_payment(self, event_bus: EventBus):
        cart = Cart(event_bus, name="Bob")
        assert cart.validate() is False

        cart.update_payment(PaymentData(payment_method="cash", address="1 Main St"))
        cart.update_contact(ContactData(email="bob@example.com", phone="+100"))

        assert cart.payment_method == "cash"
        assert cart.address == "1 Main St"
        assert cart.email == "bob@example.com"
        assert cart.phone == "+100"
        assert cart.validate() is True


class TestCartOrder:
    """Tests for serializing the cart as an order."""

    def test_to_order_uses_wire_field_names(self, cart: Cart, priced_product, unpriced_product):
        cart.add_item(priced_product)
        cart.add_item(unpriced_product)

        payload = cart.to_order().to_payload()

        assert set(payload) == {"name", "email", "phone", "address", "cartItems", "paymentMethod"}
        assert payload["paymentMethod"] == "online"
        assert payload["cartItems"][0] == {
            "id": "p1",
            "title": "Test Product",
            "description": "A product with a price",
            "image": "/p1.svg",
            "category": "testing",
            "price": 10.0,
        }
        assert payload["cartItems"][1]["price"] is None

    def test_to_order_is_a_snapshot(self, cart: Cart, priced_product):
        cart.add_item(priced_product)
        order = cart.to_order()

        cart.clear()

        assert len(order.cart_items) == 1
