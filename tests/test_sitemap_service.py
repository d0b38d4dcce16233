# ==============================================================================
# test_sitemap_service.py — Crawl orchestration tests
# ==============================================================================
# Purpose: Test ad-hoc and configured-source crawls end to end
# Sections: Imports, Fixtures, Test functions
# ==============================================================================

# Standard Library -----
import json

# Third Party -----
import pytest

# Sitemap Tree ----
from sitemap_tree.services.config_service import ConfigService
from sitemap_tree.services.sitemap_service import SitemapService
from sitemap_tree.utils.json_writer import JsonWriter

from tests.helpers import sitemap_index_xml, urlset_xml

# ==============================================================================
# Fixtures
# ==============================================================================

@pytest.fixture
def crawl_site(sitemap_server):
    leaf = sitemap_server.add("/posts.xml", urlset_xml("https://example.com/post-1", "https://example.com/post-2"))
    return sitemap_server.add("/sitemap.xml", sitemap_index_xml(leaf, sitemap_server.url("/gone.xml")))


@pytest.fixture
def config(sitemap_env, tmp_path, crawl_site):
    path = tmp_path / "sitemaps.yaml"
    path.write_text(
        "sources:\n"
        "  site:\n"
        "    name: Site\n"
        f"    url: {crawl_site}\n"
        "    retries: 1\n",
        encoding="utf-8"
    )
    return ConfigService(sources_path=path)

# ==============================================================================
# Test functions
# ==============================================================================

async def test_crawl_url_uses_overrides(config, crawl_site, sitemap_server):
    response = await SitemapService(config).crawl_url(crawl_site, retries=2)

    assert response.sites == ["https://example.com/post-1", "https://example.com/post-2"]
    assert response.errors[0].retries == 2
    assert sitemap_server.hits["/gone.xml"] == 3


async def test_crawl_source_writes_output(config, tmp_path, sitemap_server):
    service = SitemapService(config, json_writer=JsonWriter(tmp_path / "output"))

    response = await service.crawl_source("site")

    assert len(response.sites) == 2
    assert sitemap_server.hits["/gone.xml"] == 2

    [result_dir] = list((tmp_path / "output").iterdir())
    written = json.loads((result_dir / "sitemap_result.json").read_text(encoding="utf-8"))
    summary = json.loads((result_dir / "crawl_summary.json").read_text(encoding="utf-8"))
    assert written["sites"] == response.sites
    assert summary["errors_found"] == 1


async def test_crawl_all_sources(config):
    results = await SitemapService(config).crawl_all_sources()

    assert list(results) == ["site"]
    assert len(results["site"].sites) == 2


async def test_crawl_unknown_source_raises(config):
    with pytest.raises(ValueError):
        await SitemapService(config).crawl_source("missing")


async def test_crawl_url_writes_output_under_host_id(config, crawl_site, tmp_path, sitemap_server):
    service = SitemapService(config, json_writer=JsonWriter(tmp_path / "output"))

    response = await service.crawl_url(crawl_site)

    [result_dir] = list((tmp_path / "output").iterdir())
    port = sitemap_server.server.port
    assert result_dir.name.startswith(f"127_0_0_1_{port}_")
    written = json.loads((result_dir / "sitemap_result.json").read_text(encoding="utf-8"))
    assert written["sites"] == response.sites
    assert (result_dir / "crawl_summary.json").exists()


async def test_crawl_url_writes_output_under_explicit_id(config, crawl_site, tmp_path):
    service = SitemapService(config, json_writer=JsonWriter(tmp_path / "output"))

    await service.crawl_url(crawl_site, output_id="adhoc")

    [result_dir] = list((tmp_path / "output").iterdir())
    assert result_dir.name.startswith("adhoc_")


async def test_crawl_url_without_writer_writes_nothing(config, crawl_site, tmp_path):
    await SitemapService(config).crawl_url(crawl_site)

    assert not (tmp_path / "output").exists()
