"""Shopping Cart aggregate. One per user, holding at most one line per product.

Adding a product that is already in the cart tops up the existing line
instead of creating a second one. Every mutation bumps ``revision``; an order
records the cart id and revision it was placed from (``checkout_key``) so the
same cart contents cannot be ordered twice.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from storefront.domain import storefront

MAX_QUANTITY = 99


def validate_quantity(quantity, field="quantity"):
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError({field: ["Quantity must be a whole number"]})
    if quantity < 1:
        raise ValidationError({field: ["Quantity must be at least 1"]})
    if quantity > MAX_QUANTITY:
        raise ValidationError({field: [f"Quantity cannot exceed {MAX_QUANTITY}"]})


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, max_value=MAX_QUANTITY)
    added_at = DateTime()


@storefront.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    revision = Integer(default=0, min_value=0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, revision=0, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------
    def checkout_key(self) -> str:
        return f"{self.id}:{self.revision}"

    def item(self, item_id) -> CartItem:
        """Return the line with ``item_id``.

        Raises ``ObjectNotFoundError`` when the id belongs to no line of this
        cart, which is also the answer for another user's item.
        """
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ObjectNotFoundError({"_entity": f"Cart item {item_id} not found"})
        return item

    def item_for_product(self, product_id) -> CartItem | None:
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity=1) -> CartItem:
        """Add ``quantity`` of a product, merging into an existing line."""
        validate_quantity(quantity)

        now = datetime.now(UTC)
        existing = self.item_for_product(product_id)

        if existing:
            new_quantity = existing.quantity + quantity
            if new_quantity > MAX_QUANTITY:
                raise ValidationError({"quantity": [f"Quantity cannot exceed {MAX_QUANTITY}"]})
            existing.quantity = new_quantity
            item = existing
        else:
            item = CartItem(product_id=product_id, quantity=quantity, added_at=now)
            self.add_items(item)

        self._touch(now)

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item.id),
                product_id=str(product_id),
                quantity=quantity,
                new_quantity=item.quantity,
            )
        )
        return item

    def update_item_quantity(self, item_id, new_quantity) -> CartItem:
        validate_quantity(new_quantity)

        item = self.item(item_id)
        previous_quantity = item.quantity
        item.quantity = new_quantity
        self._touch(datetime.now(UTC))

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item.id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )
        return item

    def remove_item(self, item_id):
        item = self.item(item_id)
        self.remove_items(item)
        self._touch(datetime.now(UTC))

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item.id),
                product_id=str(item.product_id),
            )
        )

    def clear(self):
        """Remove every line. Clearing an empty cart is allowed."""
        removed = list(self.items)
        for item in removed:
            self.remove_items(item)
        self._touch(datetime.now(UTC))

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                items_removed=len(removed),
            )
        )

    def _touch(self, now):
        self.revision = (self.revision or 0) + 1
        self.updated_at = now
