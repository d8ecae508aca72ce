from storefront.cart.cart import Cart
from storefront.domain import storefront


@storefront.repository(part_of=Cart)
class CartRepository:
    def for_user(self, user_id) -> Cart | None:
        """The user's cart, or None if they have never added anything."""
        return self._dao.query.filter(user_id=str(user_id)).all().first
