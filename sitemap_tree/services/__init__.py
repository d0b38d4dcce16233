# ==============================================================================
# services/__init__.py — Service layer exports
# ==============================================================================
# Purpose: Configuration and crawl orchestration services
# ==============================================================================

from .config_service import ConfigService, config_service
from .sitemap_service import SitemapService

__all__ = [
    'ConfigService',
    'config_service',
    'SitemapService',
]
