"""Domain events for the Wishlist aggregate."""

from protean.fields import Identifier

from storefront.domain import storefront


@storefront.event(part_of="Wishlist")
class WishlistItemAdded:
    """A product was saved to the wishlist."""

    __version__ = "v1"

    wishlist_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="Wishlist")
class WishlistItemRemoved:
    """A product was taken off the wishlist."""

    __version__ = "v1"

    wishlist_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
