# ==============================================================================
# sitemap_parser.py — Sitemap XML parsing utilities
# ==============================================================================
# Purpose: Classify sitemap XML as a urlset, a sitemap index, or a failure
# Sections: Imports, Public API, Helper Functions
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import List, Optional, Union

# Sitemap Tree ----
from sitemap_tree.models.crawl_models import ErrorType, SiteEntry
from sitemap_tree.models.fetch_models import (
    ParsedDocument,
    ParseFailure,
    SitemapIndexDocument,
    UrlSetDocument,
)

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["parse_sitemap", "parse_lastmod"]

# W3C datetime variants seen in the wild, most specific first
LASTMOD_FORMATS = [
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d",
    "%Y-%m",
    "%Y",
]

# ==============================================================================
# Public API
# ==============================================================================

def parse_sitemap(content: Union[bytes, str]) -> ParsedDocument:
    """
    Parse sitemap XML into a structured document.

    A urlset with at least one <url> wins, then a sitemapindex with at
    least one <sitemap>. Anything else, including malformed XML, is a
    ParseFailure.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        return ParseFailure(error_type=ErrorType.PARSE, message=f"Failed to parse sitemap XML: {e}")

    root_name = _local_name(root.tag)

    if root_name == "urlset":
        url_elements = _children(root, "url")
        if url_elements:
            return UrlSetDocument(entries=[
                entry for entry in (_site_entry(url_elem) for url_elem in url_elements)
                if entry is not None
            ])

    if root_name == "sitemapindex":
        sitemap_elements = _children(root, "sitemap")
        if sitemap_elements:
            return SitemapIndexDocument(sitemaps=[
                loc for loc in (_child_text(sitemap_elem, "loc") for sitemap_elem in sitemap_elements)
                if loc
            ])

    return ParseFailure(
        error_type=ErrorType.UNKNOWN_STATE,
        message=f"An unknown error occurred. Unrecognized sitemap document with root <{root_name}>"
    )


def parse_lastmod(value: Optional[str]) -> Optional[datetime]:
    """Parse a W3C datetime into an aware datetime, naive values are taken as UTC."""
    if not value:
        return None

    text = value.strip().replace(" ", "T")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    for fmt in LASTMOD_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    return None

# ==============================================================================
# Helper Functions
# ==============================================================================

def _local_name(tag: str) -> str:
    """Strip the {namespace} prefix from an element tag."""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    for child in _children(element, name):
        if child.text and child.text.strip():
            return child.text.strip()
    return None


def _site_entry(url_elem: ET.Element) -> Optional[SiteEntry]:
    loc = _child_text(url_elem, "loc")
    if not loc:
        return None
    return SiteEntry(loc=loc, lastmod=parse_lastmod(_child_text(url_elem, "lastmod")))
