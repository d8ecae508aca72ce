"""FastAPI endpoints for the Storefront."""

from fastapi import APIRouter, Depends, Request
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.account.registration import RegisterUser, authenticate, get_user
from storefront.api.schemas import (
    AddToCartRequest,
    AddToWishlistRequest,
    InWishlistResponse,
    LoginRequest,
    PlaceOrderRequest,
    RegisterRequest,
    StatusResponse,
    UpdateCartQuantityRequest,
)
from storefront.api.session import current_user_id, login_user, logout_user
from storefront.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.queries import cart_summary
from storefront.catalogue.queries import (
    get_category,
    get_category_by_slug,
    get_product,
    list_categories,
    list_products,
    list_products_by_category,
    search_products,
)
from storefront.domain import logger
from storefront.order.checkout import place_order
from storefront.order.queries import get_order, list_orders
from storefront.wishlist.items import AddToWishlist, RemoveFromWishlist, RemoveWishlistItem
from storefront.wishlist.queries import is_in_wishlist, wishlist_items

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])
category_router = APIRouter(prefix="/api/categories", tags=["categories"])
product_router = APIRouter(prefix="/api/products", tags=["products"])
cart_router = APIRouter(prefix="/api/cart", tags=["cart"])
wishlist_router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


# --- Auth endpoints ---


@auth_router.post("/register", status_code=201)
async def register(body: RegisterRequest, request: Request) -> dict:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        full_name=body.full_name,
        phone=body.phone,
        password=body.password,
    )
    user_id = current_domain.process(command, asynchronous=False)
    login_user(request, user_id)
    logger.info("user_registered", user_id=user_id)
    return get_user(user_id).public_profile()


@auth_router.post("/login")
async def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.email, body.password)
    if user is None:
        raise ValidationError({"credentials": ["Invalid email or password"]})

    login_user(request, user.id)
    return user.public_profile()


@auth_router.post("/logout", response_model=StatusResponse)
async def logout(request: Request) -> StatusResponse:
    logout_user(request)
    return StatusResponse()


@auth_router.get("/me")
async def me(user_id: str = Depends(current_user_id)) -> dict:
    return get_user(user_id).public_profile()


# --- Catalogue endpoints ---


@category_router.get("")
async def categories() -> list[dict]:
    return [category.to_dict() for category in list_categories()]


@category_router.get("/slug/{slug}")
async def category_by_slug(slug: str) -> dict:
    return get_category_by_slug(slug).to_dict()


@category_router.get("/{category_id}")
async def category(category_id: str) -> dict:
    return get_category(category_id).to_dict()


@product_router.get("")
async def products(category: str | None = None, search: str | None = None) -> list[dict]:
    if category:
        found = list_products_by_category(category)
    elif search and search.strip():
        found = search_products(search.strip())
    else:
        found = list_products()
    return [product.to_dict() for product in found]


@product_router.get("/{product_id}")
async def product(product_id: str) -> dict:
    return get_product(product_id).to_dict()


# --- Cart endpoints ---


@cart_router.get("")
async def view_cart(user_id: str = Depends(current_user_id)) -> dict:
    return cart_summary(user_id)


@cart_router.post("", status_code=201)
async def add_cart_item(body: AddToCartRequest, user_id: str = Depends(current_user_id)) -> dict:
    command = AddToCart(user_id=user_id, product_id=body.product_id, quantity=body.quantity)
    return current_domain.process(command, asynchronous=False)


@cart_router.put("/{item_id}")
async def update_cart_item(
    item_id: str, body: UpdateCartQuantityRequest, user_id: str = Depends(current_user_id)
) -> dict:
    command = UpdateCartQuantity(user_id=user_id, item_id=item_id, quantity=body.quantity)
    return current_domain.process(command, asynchronous=False)


@cart_router.delete("/{item_id}", response_model=StatusResponse)
async def remove_cart_item(item_id: str, user_id: str = Depends(current_user_id)) -> StatusResponse:
    current_domain.process(RemoveFromCart(user_id=user_id, item_id=item_id), asynchronous=False)
    return StatusResponse()


@cart_router.delete("", response_model=StatusResponse)
async def clear_cart(user_id: str = Depends(current_user_id)) -> StatusResponse:
    current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
    return StatusResponse()


# --- Wishlist endpoints ---


@wishlist_router.get("")
async def view_wishlist(user_id: str = Depends(current_user_id)) -> list[dict]:
    return wishlist_items(user_id)


@wishlist_router.post("", status_code=201)
async def add_wishlist_item(body: AddToWishlistRequest, user_id: str = Depends(current_user_id)) -> dict:
    command = AddToWishlist(user_id=user_id, product_id=body.product_id)
    return current_domain.process(command, asynchronous=False)


@wishlist_router.get("/{product_id}/status", response_model=InWishlistResponse)
async def wishlist_status(product_id: str, user_id: str = Depends(current_user_id)) -> InWishlistResponse:
    return InWishlistResponse(in_wishlist=is_in_wishlist(user_id, product_id))


@wishlist_router.delete("/products/{product_id}", response_model=StatusResponse)
async def remove_wishlist_product(product_id: str, user_id: str = Depends(current_user_id)) -> StatusResponse:
    current_domain.process(RemoveFromWishlist(user_id=user_id, product_id=product_id), asynchronous=False)
    return StatusResponse()


@wishlist_router.delete("/{item_id}", response_model=StatusResponse)
async def remove_wishlist_item(item_id: str, user_id: str = Depends(current_user_id)) -> StatusResponse:
    current_domain.process(RemoveWishlistItem(user_id=user_id, item_id=item_id), asynchronous=False)
    return StatusResponse()


# --- Order endpoints ---


@order_router.get("")
async def orders(user_id: str = Depends(current_user_id)) -> list[dict]:
    return list_orders(user_id)


@order_router.get("/{order_id}")
async def order(order_id: str, user_id: str = Depends(current_user_id)) -> dict:
    return get_order(user_id, order_id)


@order_router.post("", status_code=201)
async def create_order(body: PlaceOrderRequest, user_id: str = Depends(current_user_id)) -> dict:
    return place_order(
        user_id,
        full_name=body.full_name,
        address=body.address,
        city=body.city,
        zip_code=body.zip_code,
        phone=body.phone,
        payment_method=body.payment_method,
    )
