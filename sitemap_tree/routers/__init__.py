# ==============================================================================
# routers/__init__.py — API Route Handlers
# ==============================================================================
# Purpose: FastAPI route handlers for the application
# ==============================================================================

from .sitemap_router import router as sitemap_router, get_sitemap_service

__all__ = [
    'sitemap_router',
    'get_sitemap_service',
]
