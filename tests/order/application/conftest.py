import pytest
from protean import current_domain
from storefront.cart.items import AddToCart

SHIPPING = {
    "full_name": "Sam Runner",
    "address": "1 Stadium Way",
    "city": "Springfield",
    "zip_code": "62701",
    "phone": "555-0100",
    "payment_method": "credit",
}


@pytest.fixture()
def shipping():
    return dict(SHIPPING)


@pytest.fixture()
def filled_cart(make_product):
    """user-001's cart: 2 x product A at 10.00 and 1 x product B at 5.00."""
    product_a = make_product(name="Product A", price=10.0)
    product_b = make_product(name="Product B", price=5.0)
    current_domain.process(AddToCart(user_id="user-001", product_id=product_a, quantity=2), asynchronous=False)
    current_domain.process(AddToCart(user_id="user-001", product_id=product_b, quantity=1), asynchronous=False)
    return {"a": product_a, "b": product_b}
