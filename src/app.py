"""Cymelle FastAPI application.

Serves the commerce (catalog and orders) and rides domains from one process.
Commands are processed synchronously; each request is wrapped in the domain
context that owns its URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay from domain.toml.
from commerce.domain import commerce  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from rides.domain import rides  # noqa: E402

from commerce.utils.logging import add_context, clear_context
from shared.gateway import register_error_handlers

commerce.init()
rides.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/products": commerce,
    "/orders": commerce,
    "/rides": rides,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Cymelle API",
    description="Product catalog, order placement and ride hailing",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
register_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from commerce.api import order_router, product_router  # noqa: E402
from rides.api import ride_router  # noqa: E402

app.include_router(product_router)
app.include_router(order_router)
app.include_router(ride_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "commerce": {"name": commerce.name},
                "rides": {"name": rides.name},
            },
        }
    )
