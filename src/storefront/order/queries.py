"""Order history: orders joined with the products on each line."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.order.order import Order


def _product_or_none(products, product_id):
    try:
        return products.get(product_id).to_dict()
    except ObjectNotFoundError:
        return None


def order_record(order: Order) -> dict:
    products = current_domain.repository_for(Product)
    record = order.to_dict()
    record["items"] = [
        {
            "id": str(item.id),
            "order_id": str(order.id),
            "product_id": str(item.product_id),
            "quantity": item.quantity,
            "price": item.price,
            "product": _product_or_none(products, item.product_id),
        }
        for item in order.items
    ]
    return record


def list_orders(user_id) -> list[dict]:
    return [order_record(order) for order in current_domain.repository_for(Order).for_user(user_id)]


def get_order(user_id, order_id) -> dict:
    """One of the user's orders. Another user's order is reported as missing."""
    order = current_domain.repository_for(Order).get(order_id)
    if str(order.user_id) != str(user_id):
        raise ObjectNotFoundError({"_entity": f"Order {order_id} not found"})
    return order_record(order)
