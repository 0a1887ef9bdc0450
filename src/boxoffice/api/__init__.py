"""Box office API package."""

from boxoffice.api.routes import cart_router, catalog_router, order_router

__all__ = ["catalog_router", "cart_router", "order_router"]
