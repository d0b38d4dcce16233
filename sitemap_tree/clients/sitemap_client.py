# ==============================================================================
# sitemap_client.py — HTTP client for sitemap documents
# ==============================================================================
# Purpose: Single-attempt GET with timeout cancellation and outcome classification
# Sections: Imports, Protocols, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import asyncio
import time
from typing import Optional, Protocol

# Third Party -----
import aiohttp

# Sitemap Tree ----
from sitemap_tree.exceptions import CrawlerNotInitializedError
from sitemap_tree.models.crawl_models import CrawlConfig
from sitemap_tree.models.fetch_models import (
    FetchOutcome,
    FetchSuccess,
    HttpErrorOutcome,
    TimeoutOutcome,
    TransportErrorOutcome,
)

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["SitemapFetcher", "SitemapClient"]

# ==============================================================================
# Protocols
# ==============================================================================

class SitemapFetcher(Protocol):
    """Anything that can turn a URL into a FetchOutcome in one attempt."""

    async def fetch(self, url: str) -> FetchOutcome: ...

# ==============================================================================
# Main Classes
# ==============================================================================

class SitemapClient:
    """Thin aiohttp client that performs one bare GET per call, no retries."""

    def __init__(self, config: CrawlConfig, session: Optional[aiohttp.ClientSession] = None):
        self.config = config
        self._client = session
        self._owns_client = session is None

    async def __aenter__(self):
        """Async context manager for HTTP client lifecycle."""
        if self._client is None:
            # The per-request timer in fetch() is the only deadline
            self._client = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None))
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up HTTP client."""
        if self._client and self._owns_client:
            await self._client.close()
            self._client = None

    async def fetch(self, url: str) -> FetchOutcome:
        """
        GET a sitemap, racing the request against the configured timeout.

        Args:
            url: Sitemap URL

        Returns:
            FetchSuccess on HTTP 200, otherwise the matching failure outcome
        """
        if not self._client:
            raise CrawlerNotInitializedError("SitemapClient")

        started = time.monotonic()
        request = asyncio.ensure_future(self._get(url))

        try:
            done, _ = await asyncio.wait({request}, timeout=self.config.timeout_seconds)
        except asyncio.CancelledError:
            request.cancel()
            raise

        if request not in done:
            # Timer won: abort the in-flight request so its connection is released
            request.cancel()
            await asyncio.gather(request, return_exceptions=True)
            return TimeoutOutcome(
                elapsed_ms=int((time.monotonic() - started) * 1000),
                message=f"Request timed out after {self.config.timeout} milliseconds for url: '{url}'"
            )

        try:
            status, reason, body, content_type = request.result()
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as e:
            return TransportErrorOutcome(
                message=f"Error occurred: {e.__class__.__name__}: {e}",
                error_name=e.__class__.__name__
            )

        if status != 200:
            return HttpErrorOutcome(
                status_code=status,
                message=f"HTTP Error occurred: Response code {status} ({reason})"
            )

        return FetchSuccess(body=body, status_code=status, content_type=content_type)

    async def _get(self, url: str):
        """Issue the GET and read the whole body."""
        options = {} if self.config.reject_unauthorized else {"ssl": False}

        async with self._client.get(url, headers=self.config.request_headers, allow_redirects=True, **options) as response:
            body = await response.read()
            return response.status, response.reason, body, response.headers.get("Content-Type")
