"""Tests for cart total computation."""

from types import SimpleNamespace

from storefront.cart.pricing import compute_totals


def _line(quantity, price, sale_price=None):
    return {"quantity": quantity, "product": {"price": price, "sale_price": sale_price}}


def test_empty_cart_totals():
    totals = compute_totals([])
    assert (totals.subtotal, totals.tax, totals.total, totals.item_count) == (0.0, 0.0, 0.0, 0)


def test_totals_use_list_price():
    totals = compute_totals([_line(2, 10.0), _line(1, 20.0)])
    assert totals.subtotal == 40.0
    assert totals.tax == 3.2
    assert totals.total == 43.2
    assert totals.item_count == 3


def test_totals_prefer_sale_price():
    totals = compute_totals([_line(2, 24.95, sale_price=22.45)])
    assert totals.subtotal == 44.9
    assert totals.tax == 3.59
    assert totals.total == 48.49


def test_totals_accept_product_objects():
    product = SimpleNamespace(price=10.0, sale_price=None)
    assert compute_totals([{"quantity": 3, "product": product}]).subtotal == 30.0


def test_amounts_are_rounded_to_cents():
    totals = compute_totals([_line(3, 0.1)])
    assert totals.subtotal == 0.3
    assert totals.tax == 0.02
    assert totals.total == 0.32


def test_compute_totals_is_pure():
    lines = [_line(2, 10.0)]
    assert compute_totals(lines) == compute_totals(lines)
    assert lines == [_line(2, 10.0)]
