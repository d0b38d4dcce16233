# ==============================================================================
# __init__.py — Model layer exports
# ==============================================================================
# Purpose: Export Pydantic models for easy importing
# Sections: Imports, Public exports
# ==============================================================================

from .crawl_models import (
    ErrorType,
    CrawlConfig,
    SiteEntry,
    ErrorRecord,
    CrawlResult,
    SitemapResponse,
    CrawlSummary
)

from .fetch_models import (
    FetchSuccess,
    HttpErrorOutcome,
    TimeoutOutcome,
    TransportErrorOutcome,
    FetchOutcome,
    UrlSetDocument,
    SitemapIndexDocument,
    ParseFailure,
    ParsedDocument
)

from .config_models import (
    SitemapSource,
    SitemapSourcesConfig
)

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = [
    # Crawl Models
    "ErrorType",
    "CrawlConfig",
    "SiteEntry",
    "ErrorRecord",
    "CrawlResult",
    "SitemapResponse",
    "CrawlSummary",

    # Fetch Models
    "FetchSuccess",
    "HttpErrorOutcome",
    "TimeoutOutcome",
    "TransportErrorOutcome",
    "FetchOutcome",
    "UrlSetDocument",
    "SitemapIndexDocument",
    "ParseFailure",
    "ParsedDocument",

    # Config Models
    "SitemapSource",
    "SitemapSourcesConfig"
]
