"""FastAPI application factory for a storefront session."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from boxoffice.api.routes import cart_router, catalog_router, order_router
from boxoffice.domain import boxoffice
from boxoffice.storefront import Storefront
from boxoffice.utils.logging import add_context, clear_context


def create_app(storefront: Storefront) -> FastAPI:
    app = FastAPI(
        title="Box Office API",
        description="Concert listings, ticket cart and checkout",
    )
    app.state.storefront = storefront

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the box office domain context and bind request details to log lines."""
        add_context(method=request.method, path=request.url.path)
        try:
            with boxoffice.domain_context():
                return await call_next(request)
        finally:
            clear_context()

    app.include_router(catalog_router)
    app.include_router(cart_router)
    app.include_router(order_router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "domain": boxoffice.name, "catalog_version": storefront.index.version}

    return app
