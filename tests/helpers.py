# ==============================================================================
# helpers.py — Test helpers
# ==============================================================================
# Purpose: Local sitemap HTTP server and XML builders for crawl tests
# Sections: Imports, XML builders, Sitemap server, TLS
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import asyncio
import gzip
import ssl
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

# Third Party -----
from aiohttp import web
from aiohttp.test_utils import TestServer

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# ==============================================================================
# XML builders
# ==============================================================================

def urlset_xml(*entries: Union[str, Tuple[str, Optional[str]]]) -> bytes:
    """Build a urlset, entries are locs or (loc, lastmod) pairs."""
    parts = []
    for entry in entries:
        loc, lastmod = (entry, None) if isinstance(entry, str) else entry
        lastmod_xml = f"<lastmod>{lastmod}</lastmod>" if lastmod else ""
        parts.append(f"<url><loc>{loc}</loc>{lastmod_xml}</url>")

    return (
        f'<?xml version="1.0" encoding="UTF-8"?>'
        f'<urlset xmlns="{SITEMAP_NS}">{"".join(parts)}</urlset>'
    ).encode("utf-8")


def sitemap_index_xml(*locs: str) -> bytes:
    """Build a sitemapindex listing child sitemap locs."""
    parts = "".join(f"<sitemap><loc>{loc}</loc></sitemap>" for loc in locs)
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>'
        f'<sitemapindex xmlns="{SITEMAP_NS}">{parts}</sitemapindex>'
    ).encode("utf-8")


def gzipped(data: bytes) -> bytes:
    return gzip.compress(data)

# ==============================================================================
# Sitemap server
# ==============================================================================

@dataclass
class Route:
    body: Union[bytes, Callable[[], bytes]] = b""
    status: int = 200
    delay: float = 0.0
    content_type: str = "application/xml"


class SitemapServer:
    """aiohttp test server serving registered sitemap documents by path."""

    def __init__(self):
        self.routes: Dict[str, Route] = {}
        self.hits: Counter = Counter()
        self.headers: Dict[str, Dict[str, str]] = {}
        self.in_flight = 0
        self.peak_in_flight = 0

        app = web.Application()
        app.router.add_route("GET", "/{tail:.*}", self._handle)
        self.server = TestServer(app)

    def add(self, path: str, body: Union[bytes, Callable[[], bytes]] = b"", **options) -> str:
        """Register a document and return its absolute URL."""
        self.routes[path] = Route(body=body, **options)
        return self.url(path)

    async def start(self, ssl_context: Optional[ssl.SSLContext] = None) -> None:
        """Start listening, over HTTPS when an SSL context is given."""
        await self.server.start_server(ssl=ssl_context)

    async def close(self) -> None:
        await self.server.close()

    def url(self, path: str) -> str:
        return str(self.server.make_url(path))

    async def _handle(self, request: web.Request) -> web.Response:
        self.hits[request.path] += 1
        self.headers[request.path] = dict(request.headers)

        route = self.routes.get(request.path)
        if route is None:
            return web.Response(status=404, text="Not Found")

        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            if route.delay:
                await asyncio.sleep(route.delay)
            body = route.body() if callable(route.body) else route.body
            return web.Response(body=body, status=route.status, content_type=route.content_type)
        finally:
            self.in_flight -= 1


# ==============================================================================
# TLS
# ==============================================================================

CERT_DIR = Path(__file__).parent / "data"


def self_signed_server_context() -> ssl.SSLContext:
    """Server context for the bundled self-signed localhost certificate."""
    context = ssl.create_default_context(ssl.Purpose.CLIENT_AUTH)
    context.load_cert_chain(CERT_DIR / "localhost.crt", CERT_DIR / "localhost.key")
    return context
