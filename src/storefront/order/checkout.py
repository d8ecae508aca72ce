"""Checkout: place an order from the cart, then empty the cart.

Placing the order is the atomic part. Clearing the cart runs afterwards in
its own unit of work; if it fails the order still stands and the failure is
logged. The cart's revision is recorded on the order, so a cart left behind
by a failed clear cannot be ordered again unchanged.
"""

from protean.utils.globals import current_domain

from storefront.cart.items import ClearCart
from storefront.domain import logger
from storefront.order.placement import PlaceOrder
from storefront.order.queries import get_order


def place_order(user_id, full_name, address, city, zip_code, phone, payment_method) -> dict:
    order_id = current_domain.process(
        PlaceOrder(
            user_id=user_id,
            full_name=full_name,
            address=address,
            city=city,
            zip_code=zip_code,
            phone=phone,
            payment_method=payment_method,
        ),
        asynchronous=False,
    )

    try:
        current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
    except Exception:
        logger.exception("cart_clear_failed", user_id=str(user_id), order_id=order_id)

    return get_order(user_id, order_id)
