"""Storefront HTTP application.

``create_app`` wires the routers onto a FastAPI app bound to an initialized
domain. Every request runs inside that domain's context.
"""

import os
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from storefront.api.errors import register_exception_handlers
from storefront.api.routes import (
    auth_router,
    cart_router,
    category_router,
    order_router,
    product_router,
    wishlist_router,
)
from storefront.utils.logging import bind_request_context, clear_request_context

__all__ = ["create_app"]


def _session_secret(domain) -> str:
    return os.environ.get("SESSION_SECRET") or domain.config.get("secret_key") or "storefront-dev-secret"


def create_app(domain) -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Catalogue, cart, wishlist and orders",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context and bind request log context."""
        bind_request_context(
            request_id=request.headers.get("x-request-id", str(uuid.uuid4())),
            path=request.url.path,
            method=request.method,
        )
        try:
            with domain.domain_context():
                return await call_next(request)
        finally:
            clear_request_context()

    app.add_middleware(
        SessionMiddleware,
        secret_key=_session_secret(domain),
        session_cookie="storefront_session",
        same_site="lax",
    )

    register_exception_handlers(app)

    for router in (auth_router, category_router, product_router, cart_router, wishlist_router, order_router):
        app.include_router(router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": domain.name})

    return app
