import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(_storefront_domain):
    from storefront.api import create_app

    with TestClient(create_app(_storefront_domain)) as test_client:
        yield test_client


@pytest.fixture()
def registered_user():
    return {
        "username": "sam",
        "email": "sam@example.com",
        "full_name": "Sam Runner",
        "phone": "555-0100",
        "password": "password123",
    }


@pytest.fixture()
def logged_in_client(client, registered_user):
    response = client.post("/api/auth/register", json=registered_user)
    assert response.status_code == 201
    return client


@pytest.fixture()
def checkout_details():
    return {
        "full_name": "Sam Runner",
        "address": "1 Stadium Way",
        "city": "Springfield",
        "zip_code": "62701",
        "phone": "555-0100",
        "payment_method": "credit",
    }
