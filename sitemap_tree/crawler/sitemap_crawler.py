# ==============================================================================
# sitemap_crawler.py — Recursive sitemap tree crawler
# ==============================================================================
# Purpose: Walk a sitemap index tree and collect leaf URLs with per-node errors
# Sections: Imports, Public API, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Union

# Sitemap Tree ----
from sitemap_tree.clients.sitemap_client import SitemapClient, SitemapFetcher
from sitemap_tree.crawler.sitemap_parser import parse_sitemap
from sitemap_tree.exceptions import CrawlerNotInitializedError, DecompressionError
from sitemap_tree.models.crawl_models import (
    CrawlConfig,
    CrawlResult,
    ErrorRecord,
    ErrorType,
    SiteEntry,
    SitemapResponse,
)
from sitemap_tree.models.fetch_models import (
    FetchSuccess,
    HttpErrorOutcome,
    ParsedDocument,
    ParseFailure,
    SitemapIndexDocument,
    TimeoutOutcome,
    TransportErrorOutcome,
    UrlSetDocument,
)
from sitemap_tree.utils.concurrency_limiter import ConcurrencyLimiter
from sitemap_tree.utils.decompress import maybe_decompress

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["SitemapCrawler", "fetch_sitemap"]

logger = logging.getLogger(__name__)

Decompressor = Callable[[bytes], Awaitable[bytes]]
Parser = Callable[[bytes], ParsedDocument]
NodeFailure = Union[HttpErrorOutcome, TimeoutOutcome, TransportErrorOutcome, ParseFailure]

# ==============================================================================
# Public API
# ==============================================================================

async def fetch_sitemap(url: str, **options) -> SitemapResponse:
    """Crawl one sitemap tree with a throwaway crawler."""
    crawler = SitemapCrawler(url=url, **options)
    return await crawler.fetch()

# ==============================================================================
# Main Classes
# ==============================================================================

class SitemapCrawler:
    """
    Recursive crawler for sitemap trees.

    Leaf urlsets contribute their URLs, sitemap indexes fan out to their
    children through one concurrency limiter shared by the whole traversal,
    and failed nodes are retried up to ``config.retries`` times before they
    are recorded in ``errors``. ``fetch`` never raises.
    """

    def __init__(
        self,
        config: Optional[CrawlConfig] = None,
        *,
        fetcher: Optional[SitemapFetcher] = None,
        decompressor: Optional[Decompressor] = None,
        parser: Optional[Parser] = None,
        **options
    ):
        if config is None:
            config = CrawlConfig(**options)
        elif options:
            config = CrawlConfig(**{**config.model_dump(), **options})

        self.config = config
        self._fetcher = fetcher
        self._decompressor = decompressor or maybe_decompress
        self._parser = parser or parse_sitemap
        self._client: Optional[SitemapClient] = None
        self._limiter: Optional[ConcurrencyLimiter] = None

    async def __aenter__(self):
        """Async context manager that keeps one HTTP session for every fetch."""
        if self._fetcher is None:
            self._client = SitemapClient(self.config)
            await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up HTTP client."""
        if self._client:
            await self._client.__aexit__(exc_type, exc_val, exc_tb)
            self._client = None

    @property
    def url(self) -> Optional[str]:
        return self.config.url

    @property
    def limiter(self) -> Optional[ConcurrencyLimiter]:
        """Limiter of the most recent traversal."""
        return self._limiter

    async def fetch(self, url: Optional[str] = None) -> SitemapResponse:
        """
        Crawl a sitemap tree and return everything found.

        Args:
            url: Root sitemap URL, defaults to the configured one

        Returns:
            SitemapResponse whose files, sites and errors are always present
        """
        url = url or self.config.url
        result = CrawlResult()

        if self.config.debug and self.config.lastmod:
            logger.debug("Using minimum lastmod value of %s", self.config.lastmod)

        try:
            if not url:
                raise ValueError("No sitemap url given and none configured")

            async with self._fetcher_scope() as fetcher:
                limiter = ConcurrencyLimiter(self.config.concurrency)
                self._limiter = limiter
                result = await self._crawl(url, 0, fetcher, limiter)
        except Exception:
            if self.config.debug:
                logger.exception("Sitemap fetch failed for %s", url)

        return SitemapResponse(
            url=url,
            files=result.files,
            sites=result.sites,
            errors=result.errors
        )

    async def get_sites(self, url: Optional[str] = None) -> List[str]:
        """Crawl and return only the collected page URLs."""
        response = await self.fetch(url)
        return response.sites

    async def crawl(self, url: str, retry_index: int = 0) -> CrawlResult:
        """
        Crawl one sitemap node and everything below it.

        Needs an injected fetcher or an open async context. Use ``fetch``
        for the error-proof entry point.
        """
        fetcher = self._fetcher or self._client
        if fetcher is None:
            raise CrawlerNotInitializedError("SitemapCrawler")

        if self._limiter is None:
            self._limiter = ConcurrencyLimiter(self.config.concurrency)

        return await self._crawl(url, retry_index, fetcher, self._limiter)

    async def _crawl(
        self,
        url: str,
        retry_index: int,
        fetcher: SitemapFetcher,
        limiter: ConcurrencyLimiter
    ) -> CrawlResult:
        """Fetch, classify and recurse for one node, retrying failed attempts in place."""
        failure: Optional[NodeFailure] = None

        for attempt in range(retry_index, max(retry_index, self.config.retries) + 1):
            if failure is not None and self.config.debug:
                logger.debug(
                    "(Retry attempt: %d / %d) %s due to %s on previous request",
                    attempt, self.config.retries, url, failure.error_type.value
                )

            try:
                # The slot covers this attempt only, children acquire their own
                async with limiter.slot():
                    document = await self._load(url, fetcher)

                if isinstance(document, UrlSetDocument):
                    if self.config.debug:
                        logger.debug('Urlset found during "crawl(%s)"', url)
                    return CrawlResult.leaf(url, self._filter_sites(document.entries))

                if isinstance(document, SitemapIndexDocument):
                    if self.config.debug:
                        logger.debug('Additional sitemap found during "crawl(%s)"', url)
                    children = await asyncio.gather(*(
                        self._crawl(child_url, 0, fetcher, limiter)
                        for child_url in document.sitemaps
                    ))
                    return CrawlResult.merge(children)

                failure = document
            except Exception as e:
                if self.config.debug:
                    logger.exception('Unexpected error during "crawl(%s)"', url)
                return CrawlResult.failure(ErrorRecord(
                    url=url,
                    type=ErrorType.UNEXPECTED,
                    message=f"Error occurred: {e.__class__.__name__}: {e}",
                    retries=attempt
                ))

        if self.config.debug:
            logger.error('Error occurred during "crawl(%s)": %s', url, failure.message)

        return CrawlResult.failure(ErrorRecord(
            url=url,
            type=failure.error_type,
            message=failure.message,
            retries=attempt
        ))

    async def _load(self, url: str, fetcher: SitemapFetcher) -> Union[ParsedDocument, NodeFailure]:
        """One attempt: fetch, inflate if gzipped, parse."""
        outcome = await fetcher.fetch(url)
        if not isinstance(outcome, FetchSuccess):
            return outcome

        try:
            body = await self._decompressor(outcome.body)
        except DecompressionError as e:
            return ParseFailure(error_type=ErrorType.DECOMPRESSION, message=str(e))

        return self._parser(body)

    def _filter_sites(self, entries: List[SiteEntry]) -> List[str]:
        """Keep entries modified at or after config.lastmod, entries without lastmod drop out."""
        if self.config.lastmod == 0:
            return [entry.loc for entry in entries]

        return [
            entry.loc for entry in entries
            if entry.lastmod is not None and entry.lastmod_ms() >= self.config.lastmod
        ]

    @asynccontextmanager
    async def _fetcher_scope(self) -> AsyncIterator[SitemapFetcher]:
        """Yield the injected fetcher, the open client, or a client for this call only."""
        if self._fetcher is not None:
            yield self._fetcher
        elif self._client is not None:
            yield self._client
        else:
            async with SitemapClient(self.config) as client:
                yield client
