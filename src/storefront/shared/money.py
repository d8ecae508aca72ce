"""Money arithmetic shared by cart totals and order placement.

Amounts are persisted as floats, but every sum and product is computed on
``Decimal`` values and rounded half-up to cents before it leaves this module.
"""

from decimal import ROUND_HALF_UP, Decimal

TAX_RATE = Decimal("0.08")
CENT = Decimal("0.01")


def to_decimal(amount) -> Decimal:
    """Convert a stored float (or int/str) amount into a ``Decimal``."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def round_money(amount) -> Decimal:
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def effective_price(price, sale_price=None) -> Decimal:
    """The price a customer pays: the sale price when one is set."""
    if sale_price is not None:
        return round_money(sale_price)
    return round_money(price)


def line_total(unit_price, quantity: int) -> Decimal:
    return round_money(to_decimal(unit_price) * quantity)


def tax_on(subtotal) -> Decimal:
    return round_money(to_decimal(subtotal) * TAX_RATE)


def as_float(amount: Decimal) -> float:
    return float(round_money(amount))
