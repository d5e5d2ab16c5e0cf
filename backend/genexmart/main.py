"""
GenexMart Backend: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers and routers;
       run() starts uvicorn on the configured host and port.
Who:   uvicorn (genexmart.main:app), the `genexmart-api` console script,
       and the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware:  Request ID → Logging → GZip → CORS     │
    │                                                      │
    │  Routes:                                             │
    │   /api/categories  /api/products  /api/customers     │
    │   /api/penjualan   /  /health                        │
    │                                                      │
    │  Exception Handlers:                                 │
    │   NotFound→404 │ bad body→400 │ DB→500 │ other→500   │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the store being used
    Shutdown: dispose the engine (closes the store connection)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import make_url

from genexmart import __version__
from genexmart.config import settings
from genexmart.database import dispose_engine
from genexmart.exceptions import DatabaseError, GenexmartError, NotFoundError
from genexmart.middleware.logging import RequestLoggingMiddleware
from genexmart.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDLogFilter,
    RequestIDMiddleware,
    request_id_var,
)
from genexmart.routes import categories, customers, health, orders, products

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: LOG_FORMAT; request_id comes from RequestIDLogFilter.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Why: RequestLoggingMiddleware already writes one line per request,
    # with the request ID that uvicorn's access log lacks
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # Why: the engine logs every statement at INFO, which drowns the app log
    if settings.log_level != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup logs where the store lives; shutdown releases its connection.

    The connection itself is opened lazily by the first statement.
    """
    setup_logging()
    store = make_url(settings.sqlalchemy_url).render_as_string(hide_password=True)
    logger.info("GenexMart backend %s starting, store: %s", __version__, store)
    logger.info("Server running at http://%s:%d", settings.backend_host, settings.port)

    yield

    logger.info("GenexMart backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to {"error": message} responses.

    Handler hierarchy:
        NotFoundError    → 404
        unreadable body  → 400
        DatabaseError    → 500, raw store message in the body
        GenexmartError   → 500
        Exception        → 500, generic message (traceback logged)
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    # Why: FastAPI answers an unparseable JSON body with 422 {"detail": [...]};
    # every error body here is {"error": message} instead
    @app.exception_handler(RequestValidationError)
    async def handle_unreadable_body(request: Request, exc: RequestValidationError):
        logger.warning("[%s] Unreadable request body: %s", request_id_var.get(""), exc.errors())
        return JSONResponse(status_code=400, content={"error": "Malformed request body"})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(GenexmartError)
    async def handle_app_error(request: Request, exc: GenexmartError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        headers = {REQUEST_ID_HEADER: rid} if rid else None
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred"},
            headers=headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="GenexMart API",
        description=(
            "Point-of-sale backend: product categories, products, customers "
            "and sales (penjualan) over the genexmart database."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(categories.router)
    app.include_router(products.router)
    app.include_router(customers.router)
    app.include_router(orders.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()


def run() -> None:
    """Console entry point: serve `app` on BACKEND_HOST:PORT."""
    uvicorn.run(
        "genexmart.main:app",
        host=settings.backend_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
