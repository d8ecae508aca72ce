from protean.fields import Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A shopper created an account."""

    __version__ = "v1"

    user_id = Identifier(required=True)
    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
