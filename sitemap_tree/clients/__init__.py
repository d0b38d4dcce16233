# ==============================================================================
# __init__.py — Client layer exports
# ==============================================================================
# Purpose: Export client classes for easy importing
# Sections: Imports, Public exports
# ==============================================================================

from .sitemap_client import SitemapClient, SitemapFetcher

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["SitemapClient", "SitemapFetcher"]
