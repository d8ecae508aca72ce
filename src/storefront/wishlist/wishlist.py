"""Wishlist aggregate, a per-user set of saved products.

Unlike the cart there is no quantity: saving a product that is already on
the wishlist changes nothing.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Identifier

from storefront.domain import storefront
from storefront.wishlist.events import WishlistItemAdded, WishlistItemRemoved


@storefront.entity(part_of="Wishlist")
class WishlistItem:
    product_id = Identifier(required=True)
    added_at = DateTime()


@storefront.aggregate
class Wishlist:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(WishlistItem)
    created_at = DateTime()

    @invariant.post
    def products_are_unique(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["Product is already in the wishlist"]})

    @classmethod
    def create(cls, user_id):
        return cls(user_id=user_id, created_at=datetime.now(UTC))

    def contains(self, product_id) -> bool:
        return self.item_for_product(product_id) is not None

    def item_for_product(self, product_id) -> WishlistItem | None:
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_product(self, product_id) -> WishlistItem:
        """Save a product. Returns the existing entry when it is already saved."""
        existing = self.item_for_product(product_id)
        if existing:
            return existing

        item = WishlistItem(product_id=product_id, added_at=datetime.now(UTC))
        self.add_items(item)

        self.raise_(
            WishlistItemAdded(
                wishlist_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item.id),
                product_id=str(product_id),
            )
        )
        return item

    def remove_product(self, product_id) -> bool:
        """Remove a product if present. Returns whether anything was removed."""
        item = self.item_for_product(product_id)
        if item is None:
            return False

        self._remove(item)
        return True

    def remove_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ObjectNotFoundError({"_entity": f"Wishlist item {item_id} not found"})

        self._remove(item)

    def _remove(self, item):
        self.remove_items(item)
        self.raise_(
            WishlistItemRemoved(
                wishlist_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item.id),
                product_id=str(item.product_id),
            )
        )
