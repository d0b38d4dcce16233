# ==============================================================================
# sitemap_tree/__init__.py — Sitemap Tree Crawler
# ==============================================================================
# Purpose: Main package with public API
# ==============================================================================

# Version information
__version__ = "1.0.0"

# Crawl engine
from .crawler import SitemapCrawler, fetch_sitemap, parse_sitemap

# Clients
from .clients import SitemapClient

# Models
from .models import (
    CrawlConfig,
    CrawlResult,
    ErrorRecord,
    ErrorType,
    SiteEntry,
    SitemapResponse
)

# Exceptions
from .exceptions import SitemapTreeError, DecompressionError, CrawlerNotInitializedError

__all__ = [
    # Crawl engine
    'SitemapCrawler',
    'fetch_sitemap',
    'parse_sitemap',

    # Clients
    'SitemapClient',

    # Models
    'CrawlConfig',
    'CrawlResult',
    'ErrorRecord',
    'ErrorType',
    'SiteEntry',
    'SitemapResponse',

    # Exceptions
    'SitemapTreeError',
    'DecompressionError',
    'CrawlerNotInitializedError',

    # Metadata
    '__version__',
]
