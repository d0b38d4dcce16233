# ==============================================================================
# conftest.py — Shared test fixtures
# ==============================================================================
# Purpose: Sitemap server and environment fixtures
# ==============================================================================

# Third Party -----
import pytest
import pytest_asyncio

from tests.helpers import SitemapServer, self_signed_server_context


@pytest_asyncio.fixture
async def sitemap_server():
    server = SitemapServer()
    await server.start()
    try:
        yield server
    finally:
        await server.close()


@pytest_asyncio.fixture
async def tls_sitemap_server():
    """Same server over HTTPS with a certificate no client trusts."""
    server = SitemapServer()
    await server.start(self_signed_server_context())
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def sitemap_env(monkeypatch):
    """Clear SITEMAP_* overrides so config tests see the built-in defaults."""
    for key in [
        "SITEMAP_TIMEOUT_MS",
        "SITEMAP_CONCURRENCY",
        "SITEMAP_RETRIES",
        "SITEMAP_LASTMOD",
        "SITEMAP_REJECT_UNAUTHORIZED",
        "SITEMAP_DEBUG",
        "SITEMAP_USER_AGENT",
        "SITEMAP_SOURCES_PATH",
        "LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
