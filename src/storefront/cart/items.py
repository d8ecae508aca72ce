"""Cart item management commands and handler.

Each command names the acting user. The handler only ever loads that user's
cart, so an item id from someone else's cart is simply not found.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import MAX_QUANTITY, Cart
from storefront.cart.queries import cart_line
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront


@storefront.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1, max_value=MAX_QUANTITY)


@storefront.command(part_of="Cart")
class UpdateCartQuantity:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, max_value=MAX_QUANTITY)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command(part_of="Cart")
class ClearCart:
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        # Raises ObjectNotFoundError for an unknown product
        product = current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id) or Cart.create(user_id=command.user_id)
        item = cart.add_item(product_id=command.product_id, quantity=command.quantity or 1)
        repo.add(cart)

        return cart_line(command.user_id, item, product)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = self._cart_of(command.user_id, command.item_id)
        item = cart.update_item_quantity(item_id=command.item_id, new_quantity=command.quantity)
        repo.add(cart)

        product = current_domain.repository_for(Product).get(item.product_id)
        return cart_line(command.user_id, item, product)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = self._cart_of(command.user_id, command.item_id)
        cart.remove_item(item_id=command.item_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            return

        cart.clear()
        repo.add(cart)
        logger.debug("cart_cleared", user_id=str(command.user_id), cart_id=str(cart.id))

    @staticmethod
    def _cart_of(user_id, item_id) -> Cart:
        cart = current_domain.repository_for(Cart).for_user(user_id)
        if cart is None:
            raise ObjectNotFoundError({"_entity": f"Cart item {item_id} not found"})
        return cart
