"""Products API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductsApiError → structured JSON responses
    - CORS configured from settings (any origin by default)
    - Database session manager created on startup, stored on app.state, disposed on shutdown
    - OpenAPI document at /openapi.json, Swagger UI at /docs

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from products_api import __version__
from products_api.api.error_handlers import register_error_handlers
from products_api.api.routes import health, products
from products_api.config import get_settings
from products_api.infrastructure.database import DatabaseSessionManager
from products_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "This is a simple CRUD API application made with FastAPI "
    "and documented with OpenAPI"
)

TAGS_METADATA = [
    {"name": "Products", "description": "The products managing API"},
    {"name": "health", "description": "Liveness and readiness probes"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info(f"Products API started on port {settings.port}")
    try:
        yield
    finally:
        logger.info("Products API shutting down")
        await app.state.db_manager.dispose()
        app.state.db_manager = None


app = FastAPI(
    title="Products CRUD API",
    version=__version__,
    description=DESCRIPTION,
    license_info={"name": "MIT", "url": "https://spdx.org/licenses/MIT.html"},
    contact={"name": "Products API maintainers", "email": "nomail@noemail.com"},
    openapi_tags=TAGS_METADATA,
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(products.router)

register_error_handlers(app)
