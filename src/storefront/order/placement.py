"""Order placement: converts a user's cart into an order.

The handler runs inside one unit of work. It reads the cart, prices every
line from the catalogue as it stands now, and writes the order with all of
its lines. Emptying the cart afterwards is not part of this unit; see
``storefront.order.checkout``.
"""

from protean import handle
from protean.exceptions import InvalidOperationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront
from storefront.order.order import Order, PaymentMethod


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    full_name = String(required=True, max_length=100)
    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    phone = String(required=True, max_length=30)
    payment_method = String(required=True, choices=PaymentMethod)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart = current_domain.repository_for(Cart).for_user(command.user_id)
        if cart is None or not cart.items:
            raise InvalidOperationError({"cart": ["Cart is empty"]})

        orders = current_domain.repository_for(Order)
        checkout_key = cart.checkout_key()
        if orders.find_by_checkout_key(checkout_key) is not None:
            raise InvalidOperationError({"cart": ["These cart contents have already been ordered"]})

        products = current_domain.repository_for(Product)
        lines = []
        for item in cart.items:
            product = products.get(item.product_id)
            lines.append(
                {
                    "product_id": str(item.product_id),
                    "quantity": item.quantity,
                    "price": product.unit_price(),
                }
            )

        order = Order.place(
            user_id=command.user_id,
            lines=lines,
            shipping={
                "full_name": command.full_name,
                "address": command.address,
                "city": command.city,
                "zip_code": command.zip_code,
                "phone": command.phone,
            },
            payment_method=command.payment_method,
            checkout_key=checkout_key,
        )
        orders.add(order)

        logger.info(
            "order_created",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total=order.total,
            line_count=len(lines),
        )
        return str(order.id)
