"""Shared BDD fixtures for order placement."""

import pytest


@pytest.fixture()
def products():
    """Product ids keyed by name."""
    return {}


@pytest.fixture()
def outcome():
    """Holds the placed order or the exception raised while placing it."""
    return {"order": None, "exc": None}


@pytest.fixture()
def shopper():
    return "user-001"


@pytest.fixture()
def shipping():
    return {
        "full_name": "Sam Runner",
        "address": "1 Stadium Way",
        "city": "Springfield",
        "zip_code": "62701",
        "phone": "555-0100",
    }
