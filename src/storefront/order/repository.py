from storefront.domain import storefront
from storefront.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """The user's orders, oldest first."""
        return self._dao.query.filter(user_id=str(user_id)).order_by("created_at").all().items

    def find_by_checkout_key(self, checkout_key: str) -> Order | None:
        return self._dao.query.filter(checkout_key=checkout_key).all().first
