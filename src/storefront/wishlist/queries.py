"""Wishlist read side."""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.wishlist.wishlist import Wishlist, WishlistItem


def wishlist_entry(user_id, item: WishlistItem, product: Product) -> dict:
    return {
        "id": str(item.id),
        "user_id": str(user_id),
        "product_id": str(item.product_id),
        "added_at": item.added_at,
        "product": product.to_dict(),
    }


def is_in_wishlist(user_id, product_id) -> bool:
    wishlist = current_domain.repository_for(Wishlist).for_user(user_id)
    return wishlist is not None and wishlist.contains(product_id)


def wishlist_items(user_id) -> list[dict]:
    wishlist = current_domain.repository_for(Wishlist).for_user(user_id)
    if wishlist is None:
        return []

    products = current_domain.repository_for(Product)
    return [wishlist_entry(user_id, item, products.get(item.product_id)) for item in wishlist.items]
