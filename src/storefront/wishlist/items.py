"""Wishlist management commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.wishlist.queries import wishlist_entry
from storefront.wishlist.wishlist import Wishlist


@storefront.command(part_of="Wishlist")
class AddToWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="Wishlist")
class RemoveFromWishlist:
    """Take a product off the wishlist; nothing happens if it is not there."""

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="Wishlist")
class RemoveWishlistItem:
    """Delete a wishlist entry by its id, which must belong to the user."""

    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command_handler(part_of=Wishlist)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_user(command.user_id) or Wishlist.create(user_id=command.user_id)
        if not wishlist.contains(command.product_id):
            wishlist.add_product(command.product_id)
            repo.add(wishlist)

        return wishlist_entry(command.user_id, wishlist.item_for_product(command.product_id), product)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_user(command.user_id)
        if wishlist is not None and wishlist.remove_product(command.product_id):
            repo.add(wishlist)

    @handle(RemoveWishlistItem)
    def remove_wishlist_item(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_user(command.user_id)
        if wishlist is None:
            raise ObjectNotFoundError({"_entity": f"Wishlist item {command.item_id} not found"})

        wishlist.remove_item(command.item_id)
        repo.add(wishlist)
