from typing import Optional

from fastapi import FastAPI

from packages.ip_lookup import LookupContext, ip_lookup_router
from server.lifespan import lifespan
from server.middleware import RequestContextMiddleware


def create_app(lookup_context: Optional[LookupContext] = None) -> FastAPI:
    """Build the application.

    Args:
        lookup_context: Pre-built context. When omitted it is resolved by the
            lifespan handler at startup.
    """
    app = FastAPI(title="IP lookup", lifespan=lifespan, redirect_slashes=False)
    app.state.lookup_context = lookup_context
    app.add_middleware(RequestContextMiddleware)
    app.include_router(ip_lookup_router)
    return app


handler = create_app()
