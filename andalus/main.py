"""Al-Andalus Library catalog site main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from andalus.api.health import router as health_router
from andalus.api.middleware import error_response, setup_middleware
from andalus.api.pages import router as pages_router
from andalus.api.seo import router as seo_router
from andalus.domain.exceptions import NotFoundError
from andalus.i18n import translate
from andalus.infrastructure.cms_client import close_cms_client
from andalus.infrastructure.config import settings
from andalus.infrastructure.log import configure_logging

configure_logging(settings.log_level)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    logger.info(
        "Starting catalog site",
        version=settings.api_version,
        debug=settings.debug,
        locales=settings.supported_locales,
    )
    if not settings.cms_url:
        logger.warning("CMS_URL is not set; pages will render an empty catalog")
    if not settings.base_url:
        logger.warning("BASE_URL is not set; sitemap URLs will be degraded")

    yield

    # Shutdown
    await close_cms_client()
    logger.info("Shutting down catalog site")


app = FastAPI(
    title="Al-Andalus Library",
    description="Bilingual stationery catalog with WhatsApp ordering",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Request ID, locale log context and error handling
setup_middleware(app)

# Fixed paths first so "/{locale}" does not capture them
app.include_router(health_router, tags=["Health"])
app.include_router(seo_router)
app.include_router(pages_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    """Render unknown locales and resources as a 404."""
    return error_response(
        request,
        status.HTTP_404_NOT_FOUND,
        "NOT_FOUND",
        translate(settings.default_locale, "locale.not_found"),
        details=[exc.details],
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors (unmatched paths, wrong methods) in the error format."""
    return error_response(
        request,
        exc.status_code,
        HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
        str(exc.detail),
        headers=exc.headers,
    )
