"""Bake & Taste FastAPI application.

Serves the identity, catalogue and ordering endpoints from one Protean
domain. Commands are processed synchronously within the request.

Usage:
    uvicorn bakeandtaste.app:create_app --factory --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bakeandtaste.catalogue.api import cake_router, seller_router
from bakeandtaste.domain import bakeandtaste, logger
from bakeandtaste.identity.api import router as profile_router
from bakeandtaste.ordering.api import order_router, seller_order_router
from bakeandtaste.shared.auth import PRINCIPAL_HEADER
from bakeandtaste.shared.http import register_error_handlers
from bakeandtaste.utils.logging import add_context, clear_context


def create_app(init_domain: bool = True) -> FastAPI:
    """Build the API. Pass ``init_domain=False`` when the domain is already initialised."""
    if init_domain:
        # PROTEAN_ENV selects the config overlay (memory, sqlite, production)
        bakeandtaste.init()

    app = FastAPI(
        title="Bake & Taste API",
        description="Cake marketplace: profiles, bakery menus and orders",
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
        """Push the Protean domain context and bind request details to log lines."""
        add_context(method=request.method, path=request.url.path, principal_id=request.headers.get(PRINCIPAL_HEADER))
        try:
            with bakeandtaste.domain_context():
                return await call_next(request)
        finally:
            clear_context()

    app.include_router(profile_router)
    app.include_router(cake_router)
    app.include_router(seller_router)
    app.include_router(seller_order_router)
    app.include_router(order_router)

    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": bakeandtaste.name})

    logger.info("app_created", domain=bakeandtaste.name)
    return app
