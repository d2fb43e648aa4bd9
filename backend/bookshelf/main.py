"""
Bookshelf — Book REST Service (FastAPI Application Factory)
=============================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Run by uvicorn (uvicorn bookshelf.main:app) or the bookshelf-api script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────┐ ┌──────┐ │
    │  │  Req ID  │→│  Logging        │→│ GZip │→│ CORS │ │
    │  └──────────┘ └─────────────────┘ └──────┘ └──────┘ │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────────┐ ┌───────────────┐ │
    │  │ POST/GET /books              │ │ GET /health   │ │
    │  │ PUT/DELETE /books/{book_id}  │ │               │ │
    │  └──────────────────────────────┘ └───────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Validation→400 │ NotFound→404 │ DB/other→500  │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config check → create tables (optional)
    Shutdown: dispose database engine
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.database import create_tables, dispose_engine
from bookshelf.exceptions import (
    BookshelfError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from bookshelf.logging_config import setup_logging
from bookshelf.middleware.logging import RequestLoggingMiddleware
from bookshelf.middleware.request_id import RequestIDMiddleware, request_id_var
from bookshelf.routes import books, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Validate the database URL (logged, not fatal)
        3. Create missing tables when db_create_tables is on
    Shutdown:
        1. Dispose database engine (close all pooled connections)
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings.log_level)
    logger.info("Bookshelf %s starting up...", __version__)

    try:
        settings.validate_database_url()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    if settings.db_create_tables:
        # A store that is down at startup surfaces on the first request
        # and on /health, not here
        try:
            await create_tables()
        except Exception as e:
            logger.error("Could not create tables: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Bookshelf shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Handler hierarchy:
        ValidationError         → 400 JSON
        NotFoundError           → 404, empty body
        DatabaseError           → 500 JSON, generic message
        BookshelfError (base)   → 500 JSON
        Exception (fallback)    → 500 JSON, stack trace logged only
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] %s", rid, exc.message)
        return Response(status_code=404)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(BookshelfError)
    async def handle_bookshelf_error(request: Request, exc: BookshelfError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Bookshelf API",
        description="Create, list, update and delete book records.",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(books.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Entry point for the bookshelf-api console script."""
    uvicorn.run(
        "bookshelf.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
