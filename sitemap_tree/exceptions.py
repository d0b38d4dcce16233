"""Exceptions raised inside sitemap_tree. None of them cross SitemapCrawler.fetch()."""


class SitemapTreeError(Exception):
    """Base class for sitemap_tree errors."""


class DecompressionError(SitemapTreeError):
    """Raised when a payload carries the gzip magic header but cannot be decompressed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to decompress gzip payload: {reason}")


class CrawlerNotInitializedError(SitemapTreeError, RuntimeError):
    """Raised when a session-bound operation runs outside the async context manager."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"{component} must be used as async context manager")
