"""Pydantic request schemas for the Storefront API.

These are the external contracts. Fields the server computes itself (order
totals, prices) are not part of any request and are ignored if sent.
"""

from typing import Literal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------
class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=3, max_length=254)
    full_name: str = Field(min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=20)
    password: str = Field(min_length=6, max_length=128)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "demo",
                    "email": "demo@example.com",
                    "full_name": "Demo Shopper",
                    "phone": "555-0100",
                    "password": "password123",
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    email: str
    password: str


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1, le=99)


class UpdateCartQuantityRequest(BaseModel):
    quantity: int = Field(ge=1, le=99)


# ---------------------------------------------------------------------------
# Wishlist
# ---------------------------------------------------------------------------
class AddToWishlistRequest(BaseModel):
    product_id: str


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    full_name: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    zip_code: str = Field(min_length=1, max_length=20)
    phone: str = Field(min_length=1, max_length=20)
    payment_method: Literal["credit", "paypal", "cod"]

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {
                    "full_name": "Demo Shopper",
                    "address": "1 Stadium Way",
                    "city": "Springfield",
                    "zip_code": "62701",
                    "phone": "555-0100",
                    "payment_method": "credit",
                }
            ]
        },
    }


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class InWishlistResponse(BaseModel):
    in_wishlist: bool
