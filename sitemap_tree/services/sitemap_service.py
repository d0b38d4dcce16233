# ==============================================================================
# sitemap_service.py — Sitemap crawl orchestration
# ==============================================================================
# Purpose: Run crawls for configured sources or ad-hoc URLs and persist output
# Sections: Imports, Public API, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import logging
import re
import time
from typing import Dict, Optional, Tuple
from urllib.parse import urlparse

# Sitemap Tree ----
from sitemap_tree.crawler.sitemap_crawler import SitemapCrawler
from sitemap_tree.models.crawl_models import CrawlConfig, CrawlSummary, SitemapResponse
from sitemap_tree.services.config_service import ConfigService, config_service
from sitemap_tree.utils.json_writer import JsonWriter, build_summary

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["SitemapService"]

logger = logging.getLogger(__name__)

# ==============================================================================
# Main Classes
# ==============================================================================

class SitemapService:
    """Main orchestration service for sitemap crawls."""

    def __init__(self, config: Optional[ConfigService] = None, json_writer: Optional[JsonWriter] = None):
        self.config = config or config_service
        self.json_writer = json_writer

    async def crawl_url(self, url: str, output_id: Optional[str] = None, **overrides) -> SitemapResponse:
        """
        Crawl an ad-hoc sitemap URL with environment defaults.

        Output is written under ``output_id`` when a writer is set, the
        URL's host is used when no id is given.
        """
        crawl_config = self.config.default_crawl_config(url=url, **overrides)
        response, summary = await self._run(crawl_config)
        self._write(output_id or _output_id_for(url), response, summary)
        return response

    async def crawl_source(self, source_id: str) -> SitemapResponse:
        """Crawl one configured source and write its output when a writer is set."""
        crawl_config = self.config.crawl_config_for(source_id)
        response, summary = await self._run(crawl_config)
        self._write(source_id, response, summary)
        return response

    async def crawl_all_sources(self) -> Dict[str, SitemapResponse]:
        """Crawl every configured source one after another."""
        results = {}
        for source_id in self.config.all_sources:
            results[source_id] = await self.crawl_source(source_id)
        return results

    async def _run(self, crawl_config: CrawlConfig) -> Tuple[SitemapResponse, CrawlSummary]:
        start_time = time.monotonic()

        async with SitemapCrawler(crawl_config) as crawler:
            response = await crawler.fetch()

        summary = build_summary(response, time.monotonic() - start_time)
        logger.info(
            "Crawled %s: %d files, %d sites, %d errors in %.2fs",
            response.url, summary.files_found, summary.sites_found,
            summary.errors_found, summary.processing_time_seconds
        )
        return response, summary

    def _write(self, output_id: str, response: SitemapResponse, summary: CrawlSummary) -> None:
        if self.json_writer is None:
            return

        path = self.json_writer.write_result(output_id, response, summary)
        logger.info("Wrote %s results to %s", output_id, path)

# ==============================================================================
# Helper Functions
# ==============================================================================

def _output_id_for(url: str) -> str:
    """Directory-safe id from the URL host, e.g. www_example_com."""
    host = urlparse(url).netloc
    return re.sub(r"[^A-Za-z0-9]+", "_", host).strip("_") or "adhoc"
