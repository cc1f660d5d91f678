"""FastAPI application entry point.

Antique Books API - catalog pages and cart for a static antiquarian shop.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from antiquebooks.routes import api_router
from antiquebooks.schemas import error_payload
from antiquebooks.services.catalog import CatalogError, CatalogStore, audit_catalog
from antiquebooks.services.i18n import Translations
from antiquebooks.settings import Settings, get_settings
from antiquebooks.stores.documents import DocumentError, load_site_documents
from antiquebooks.stores.kv import KeyValueStore
from antiquebooks.stores.memory import InMemoryKeyValueStore
from antiquebooks.stores.redis import RedisKeyValueStore, close_redis, init_redis

logger = logging.getLogger("uvicorn.error")


async def load_catalog(settings: Settings) -> tuple[CatalogStore, Translations]:
    """Load and validate all static documents.

    Raises:
        CatalogError: If the catalog documents cannot be loaded or validated.
    """
    try:
        docs = await load_site_documents(settings)
    except DocumentError as e:
        raise CatalogError(str(e)) from e

    catalog = CatalogStore.from_documents(docs.items, docs.categories)
    translations = Translations(docs.translations)

    for finding in audit_catalog(catalog, settings.default_locale):
        logger.warning(f"Catalog audit: {finding}")
    for locale in settings.supported_locales:
        missing = translations.missing_labels(locale)
        if missing:
            logger.warning(f"Translations '{locale}' missing labels: {missing}")

    logger.info(
        f"Catalog loaded: {len(catalog)} items, {len(catalog.categories)} categories, "
        f"locales={settings.supported_locales}"
    )
    return catalog, translations


async def init_cart_storage(settings: Settings) -> KeyValueStore:
    """Pick the cart backend; an unreachable Redis degrades to in-memory carts."""
    if settings.cart_backend == "redis":
        try:
            await init_redis()
            return RedisKeyValueStore()
        except Exception:
            logger.exception("Redis init failed, carts will be kept in memory")
    return InMemoryKeyValueStore()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Documents are loaded before the first request is served.
    """
    # Startup
    settings = get_settings()
    app.state.catalog, app.state.translations = await load_catalog(settings)
    app.state.kv_store = await init_cart_storage(settings)

    yield

    # Shutdown
    await close_redis()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Catalog pages and cart for a static antiquarian shop",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_payload(
                "INTERNAL_ERROR",
                str(exc) if settings.debug else "Internal server error",
            ),
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "antiquebooks.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
