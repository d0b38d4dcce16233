# ==============================================================================
# crawler/__init__.py — Sitemap Crawling Components
# ==============================================================================
# Purpose: Components for crawling sitemap trees and parsing sitemap XML
# ==============================================================================

from .sitemap_crawler import SitemapCrawler, fetch_sitemap
from .sitemap_parser import parse_sitemap, parse_lastmod

__all__ = [
    'SitemapCrawler',
    'fetch_sitemap',
    'parse_sitemap',
    'parse_lastmod',
]
