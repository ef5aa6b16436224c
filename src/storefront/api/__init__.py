"""Storefront API package."""

from fastapi import Depends, FastAPI, Request
from protean import Domain

from storefront.api.auth import api_version
from storefront.api.errors import register_error_handlers
from storefront.api.routes import cart_item_router, checkout_router, order_router, user_router
from storefront.utils.logging import clear_context

VERSIONED_ROUTERS = (user_router, cart_item_router, order_router, checkout_router)


def mount(app: FastAPI, domain: Domain) -> None:
    """Wire the storefront routers, error handlers and domain context into ``app``."""

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for each request."""
        clear_context()
        with domain.domain_context():
            response = await call_next(request)
        return response

    # User routes predate versioning and are also served unprefixed
    app.include_router(user_router)
    for router in VERSIONED_ROUTERS:
        app.include_router(router, prefix="/api/v{version}", dependencies=[Depends(api_version)])

    register_error_handlers(app)


__all__ = ["mount", "user_router", "cart_item_router", "order_router", "checkout_router"]
