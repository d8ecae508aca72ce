"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was converted into an order at the prices current at that moment."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity, price}
    total = Float(required=True)
    payment_method = String(required=True, max_length=20)
    checkout_key = String(required=True, max_length=100)
    placed_at = DateTime(required=True)
