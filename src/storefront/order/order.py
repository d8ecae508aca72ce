"""Order aggregate, the immutable record of a completed checkout.

An order and its line items form one aggregate, so they are written in a
single unit of work: either the order and every line exist, or none do.
Each line carries the unit price at the moment the order was placed; later
catalogue price changes never reach it.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced
from storefront.shared.money import as_float, line_total, round_money


class OrderStatus(Enum):
    PENDING = "pending"


class PaymentMethod(Enum):
    CREDIT = "credit"
    PAYPAL = "paypal"
    COD = "cod"


@storefront.value_object(part_of="Order")
class ShippingDetails:
    """Where and to whom the order ships, as entered at checkout."""

    full_name = String(required=True, max_length=100)
    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    phone = String(required=True, max_length=30)


@storefront.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)  # unit price at order time


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    shipping = ValueObject(ShippingDetails, required=True)
    payment_method = String(required=True, choices=PaymentMethod)
    checkout_key = String(required=True, max_length=100, unique=True)
    created_at = DateTime()

    @classmethod
    def place(cls, user_id, lines, shipping, payment_method, checkout_key):
        """Create an order from priced cart lines.

        Args:
            user_id: The customer placing the order.
            lines: List of dicts with product_id, quantity and price, where
                price is the unit price (a ``Decimal``) read from the
                catalogue at this moment.
            shipping: Dict with full_name, address, city, zip_code, phone.
            payment_method: One of ``PaymentMethod`` values.
            checkout_key: Cart id and revision the lines were read from.
        """
        if not lines:
            raise ValidationError({"items": ["An order must have at least one item"]})

        total = round_money(sum((line_total(line["price"], line["quantity"]) for line in lines), Decimal("0")))
        now = datetime.now(UTC)

        order = cls(
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            total=as_float(total),
            shipping=ShippingDetails(**shipping),
            payment_method=payment_method,
            checkout_key=checkout_key,
            created_at=now,
        )
        for line in lines:
            order.add_items(
                OrderItem(
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    price=as_float(line["price"]),
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                items=json.dumps(
                    [
                        {"product_id": str(item.product_id), "quantity": item.quantity, "price": item.price}
                        for item in order.items
                    ]
                ),
                total=order.total,
                payment_method=payment_method,
                checkout_key=checkout_key,
                placed_at=now,
            )
        )
        return order
