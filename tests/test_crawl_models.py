# ==============================================================================
# test_crawl_models.py — Crawl model tests
# ==============================================================================
# Purpose: Test config validation, lastmod conversion and result merging
# Sections: Imports, Test functions
# ==============================================================================

# Standard Library -----
from datetime import datetime, timezone

# Third Party -----
import pytest
from pydantic import ValidationError

# Sitemap Tree ----
from sitemap_tree.models import CrawlConfig, CrawlResult, ErrorRecord, ErrorType, SiteEntry

# ==============================================================================
# Test functions
# ==============================================================================

def test_crawl_config_defaults():
    config = CrawlConfig(url="https://example.com/sitemap.xml")

    assert config.timeout == 15000
    assert config.timeout_seconds == 15.0
    assert config.lastmod == 0
    assert config.request_headers == {}
    assert config.debug is False
    assert config.concurrency == 10
    assert config.retries == 0
    assert config.reject_unauthorized is True


@pytest.mark.parametrize("options", [
    {"concurrency": 0},
    {"retries": -1},
    {"timeout": 0},
    {"lastmod": -5},
])
def test_crawl_config_rejects_invalid_values(options):
    with pytest.raises(ValidationError):
        CrawlConfig(**options)


def test_crawl_config_is_immutable():
    config = CrawlConfig()

    with pytest.raises(ValidationError):
        config.retries = 3


def test_site_entry_lastmod_ms():
    entry = SiteEntry(loc="https://example.com/", lastmod=datetime(2021, 9, 3, 18, 29, 19, tzinfo=timezone.utc))

    assert entry.lastmod_ms() == 1630693759000
    assert SiteEntry(loc="https://example.com/").lastmod_ms() is None


def test_merge_splits_sites_and_errors_per_child():
    error = ErrorRecord(url="https://example.com/bad.xml", type=ErrorType.HTTP, message="HTTP Error occurred", retries=0)
    good = CrawlResult.leaf("https://example.com/a.xml", ["https://example.com/1", "https://example.com/2"])
    mixed = CrawlResult(files=["https://example.com/b.xml"], sites=["https://example.com/3"], errors=[error])
    failed = CrawlResult.failure(error)

    merged = CrawlResult.merge([good, mixed, failed])

    assert merged.files == ["https://example.com/a.xml", "https://example.com/b.xml"]
    assert merged.sites == ["https://example.com/1", "https://example.com/2"]
    assert merged.errors == [error, error]
    assert merged.has_errors
    assert not CrawlResult.merge([good]).has_errors


def test_merge_does_not_alias_child_lists():
    child = CrawlResult.leaf("https://example.com/a.xml", ["https://example.com/1"])

    merged = CrawlResult.merge([child])
    merged.sites.append("https://example.com/extra")

    assert child.sites == ["https://example.com/1"]


def test_error_record_serializes_type_name():
    error = ErrorRecord(url="https://example.com/", type=ErrorType.TIMEOUT, message="timed out", retries=2)

    assert error.model_dump() == {
        "url": "https://example.com/",
        "type": "TimeoutError",
        "message": "timed out",
        "retries": 2,
    }
