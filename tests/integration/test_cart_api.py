"""Integration tests for the cart endpoints."""

import pytest


@pytest.mark.parametrize(
    "method, path",
    [("get", "/api/cart"), ("post", "/api/cart"), ("delete", "/api/cart"), ("put", "/api/cart/some-item")],
)
def test_cart_requires_login(client, method, path):
    assert client.request(method, path, json={"product_id": "p", "quantity": 1}).status_code == 401


class TestCartEndpoints:
    def test_add_and_view_cart(self, logged_in_client, make_product):
        client = logged_in_client
        socks = make_product(name="Socks", price=10.0)
        cap = make_product(name="Cap", price=20.0)

        response = client.post("/api/cart", json={"product_id": socks, "quantity": 2})
        assert response.status_code == 201
        assert response.json()["product"]["name"] == "Socks"
        client.post("/api/cart", json={"product_id": cap})

        cart = client.get("/api/cart").json()
        assert len(cart["items"]) == 2
        assert (cart["subtotal"], cart["tax"], cart["total"]) == (40.0, 3.2, 43.2)

    def test_adding_twice_merges(self, logged_in_client, make_product):
        product_id = make_product()
        logged_in_client.post("/api/cart", json={"product_id": product_id, "quantity": 2})
        response = logged_in_client.post("/api/cart", json={"product_id": product_id, "quantity": 3})

        assert response.json()["quantity"] == 5
        assert len(logged_in_client.get("/api/cart").json()["items"]) == 1

    def test_unknown_product(self, logged_in_client):
        response = logged_in_client.post("/api/cart", json={"product_id": "missing", "quantity": 1})
        assert response.status_code == 404

    @pytest.mark.parametrize("quantity", [0, 100])
    def test_quantity_out_of_range(self, logged_in_client, make_product, quantity):
        response = logged_in_client.post("/api/cart", json={"product_id": make_product(), "quantity": quantity})
        assert response.status_code == 422

    def test_update_and_remove_item(self, logged_in_client, make_product):
        client = logged_in_client
        item = client.post("/api/cart", json={"product_id": make_product(), "quantity": 1}).json()

        updated = client.put(f"/api/cart/{item['id']}", json={"quantity": 4})
        assert updated.status_code == 200
        assert updated.json()["quantity"] == 4

        assert client.delete(f"/api/cart/{item['id']}").status_code == 200
        assert client.get("/api/cart").json()["items"] == []

    def test_other_users_item_is_not_found(self, logged_in_client, make_product, registered_user):
        client = logged_in_client
        item = client.post("/api/cart", json={"product_id": make_product(), "quantity": 1}).json()

        client.post("/api/auth/logout")
        client.post("/api/auth/register", json={**registered_user, "email": "other@example.com"})

        assert client.put(f"/api/cart/{item['id']}", json={"quantity": 4}).status_code == 404
        assert client.delete(f"/api/cart/{item['id']}").status_code == 404

    def test_clear_cart(self, logged_in_client, make_product):
        logged_in_client.post("/api/cart", json={"product_id": make_product(), "quantity": 1})
        assert logged_in_client.delete("/api/cart").status_code == 200
        assert logged_in_client.get("/api/cart").json()["items"] == []
