"""Cart read side: cart lines joined with the products they refer to."""

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart, CartItem
from storefront.cart.pricing import compute_totals
from storefront.catalogue.product import Product


def cart_line(user_id, item: CartItem, product: Product) -> dict:
    return {
        "id": str(item.id),
        "user_id": str(user_id),
        "product_id": str(item.product_id),
        "quantity": item.quantity,
        "added_at": item.added_at,
        "product": product.to_dict(),
    }


def cart_lines(user_id) -> list[dict]:
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        return []

    products = current_domain.repository_for(Product)
    return [cart_line(user_id, item, products.get(item.product_id)) for item in cart.items]


def cart_summary(user_id) -> dict:
    """Cart lines plus subtotal, tax, total and item count."""
    lines = cart_lines(user_id)
    return {"items": lines, **compute_totals(lines).to_dict()}
