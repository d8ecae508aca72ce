from storefront.domain import storefront
from storefront.wishlist.wishlist import Wishlist


@storefront.repository(part_of=Wishlist)
class WishlistRepository:
    def for_user(self, user_id) -> Wishlist | None:
        return self._dao.query.filter(user_id=str(user_id)).all().first
