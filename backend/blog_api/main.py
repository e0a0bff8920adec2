"""Blog API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlogApiError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Stores initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Single-process uvicorn: the stores' guards are process-local, so running
      several workers would give each worker its own guards and id counter
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.routes import blogs, health, users
from blog_api.config import get_settings
from blog_api.core.domain_types import StoreBackend
from blog_api.infrastructure import database
from blog_api.infrastructure.observability import setup_logging
from blog_api.services import store_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.store_backend is StoreBackend.SQL:
        manager = database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.create_schema:
            await manager.create_schema()
    blog_store, _ = store_registry.init_stores(
        *store_registry.build_collections(settings.store_backend),
    )
    if settings.seed_blog_ids_from_store:
        await blog_store.seed_ids_from_store()
    logger.info(f"Blog API started ({settings.store_backend.value} backend)")
    yield
    logger.info("Blog API shutting down")
    if database.db_manager:
        await database.db_manager.dispose()


app = FastAPI(
    title="Blog API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(blogs.router)

register_error_handlers(app)


def serve() -> None:
    """Run the API with uvicorn (console script: blog-api)."""
    settings = get_settings()
    uvicorn.run(
        "blog_api.main:app", host=settings.host, port=settings.port, workers=1,
    )
