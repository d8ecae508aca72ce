"""Tests for the Cart aggregate."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.cart.cart import MAX_QUANTITY, Cart
from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated


def _make_cart():
    return Cart.create(user_id="user-001")


class TestAddItem:
    def test_add_item(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.items[0].added_at is not None

    def test_add_item_defaults_to_one(self):
        cart = _make_cart()
        cart.add_item("prod-001")
        assert cart.items[0].quantity == 1

    def test_add_same_product_merges_quantity(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2)
        cart.add_item("prod-001", 3)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_add_different_products_creates_lines(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1)
        cart.add_item("prod-002", 1)
        assert len(cart.items) == 2

    def test_add_item_raises_event(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2)
        cart.add_item("prod-001", 3)
        events = [e for e in cart._events if isinstance(e, CartItemAdded)]
        assert [(e.quantity, e.new_quantity) for e in events] == [(2, 2), (3, 5)]

    @pytest.mark.parametrize("quantity", [0, -1, MAX_QUANTITY + 1])
    def test_add_rejects_out_of_range_quantity(self, quantity):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.add_item("prod-001", quantity)

    def test_merge_cannot_exceed_maximum(self):
        cart = _make_cart()
        cart.add_item("prod-001", 90)
        with pytest.raises(ValidationError):
            cart.add_item("prod-001", 10)
        assert cart.items[0].quantity == 90


class TestUpdateQuantity:
    def test_update_quantity(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 1)
        cart.update_item_quantity(item.id, 5)
        assert cart.items[0].quantity == 5

    def test_update_quantity_raises_event(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 1)
        cart.update_item_quantity(item.id, 4)
        event = cart._events[-1]
        assert isinstance(event, CartQuantityUpdated)
        assert event.previous_quantity == 1
        assert event.new_quantity == 4

    def test_update_unknown_item(self):
        cart = _make_cart()
        with pytest.raises(ObjectNotFoundError):
            cart.update_item_quantity("missing", 2)

    def test_update_rejects_quantity_above_maximum(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 1)
        with pytest.raises(ValidationError):
            cart.update_item_quantity(item.id, 100)


class TestRemoveAndClear:
    def test_remove_item(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 1)
        cart.add_item("prod-002", 1)
        cart.remove_item(item.id)
        assert [i.product_id for i in cart.items] == ["prod-002"]
        assert isinstance(cart._events[-1], CartItemRemoved)

    def test_remove_unknown_item(self):
        with pytest.raises(ObjectNotFoundError):
            _make_cart().remove_item("missing")

    def test_clear(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1)
        cart.add_item("prod-002", 3)
        cart.clear()
        assert len(cart.items) == 0
        assert cart._events[-1].items_removed == 2
        assert isinstance(cart._events[-1], CartCleared)

    def test_clear_empty_cart(self):
        cart = _make_cart()
        cart.clear()
        assert len(cart.items) == 0


class TestRevision:
    def test_new_cart_starts_at_revision_zero(self):
        assert _make_cart().revision == 0

    def test_every_mutation_bumps_revision(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 1)
        cart.update_item_quantity(item.id, 2)
        cart.remove_item(item.id)
        cart.clear()
        assert cart.revision == 4

    def test_checkout_key_tracks_revision(self):
        cart = _make_cart()
        before = cart.checkout_key()
        cart.add_item("prod-001", 1)
        assert cart.checkout_key() != before
        assert cart.checkout_key() == f"{cart.id}:1"
