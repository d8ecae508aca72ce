"""Cart totals.

``compute_totals`` is a pure function over cart lines joined with their
products (the records produced by ``storefront.cart.queries``):

    subtotal = sum(effective unit price * quantity)
    tax      = subtotal * 8%
    total    = subtotal + tax
"""

from decimal import Decimal

from protean.fields import Float, Integer

from storefront.domain import storefront
from storefront.shared.money import as_float, effective_price, line_total, round_money, tax_on


@storefront.value_object
class CartTotals:
    """Derived money summary of a cart. Never persisted."""

    subtotal = Float(default=0.0, min_value=0.0)
    tax = Float(default=0.0, min_value=0.0)
    total = Float(default=0.0, min_value=0.0)
    item_count = Integer(default=0, min_value=0)


def _price_of(product):
    if isinstance(product, dict):
        return effective_price(product["price"], product.get("sale_price"))
    return effective_price(product.price, product.sale_price)


def compute_totals(lines) -> CartTotals:
    subtotal = Decimal("0")
    item_count = 0
    for line in lines:
        subtotal += line_total(_price_of(line["product"]), line["quantity"])
        item_count += line["quantity"]

    subtotal = round_money(subtotal)
    tax = tax_on(subtotal)

    return CartTotals(
        subtotal=as_float(subtotal),
        tax=as_float(tax),
        total=as_float(subtotal + tax),
        item_count=item_count,
    )
