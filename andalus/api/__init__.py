"""API layer module.

Contains FastAPI routers and response schemas.
"""

from andalus.api.health import router as health_router
from andalus.api.pages import router as pages_router
from andalus.api.seo import router as seo_router

__all__ = [
    "health_router",
    "pages_router",
    "seo_router",
]
