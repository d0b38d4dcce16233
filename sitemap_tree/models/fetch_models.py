# ==============================================================================
# fetch_models.py — Fetch outcomes and parsed sitemap documents
# ==============================================================================
# Purpose: Closed tagged variants passed between fetcher, parser and crawler
# Sections: Imports, Fetch outcomes, Parsed documents
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
from typing import List, Literal, Optional, Union

# Third Party -----
from pydantic import BaseModel, Field

# Sitemap Tree ----
from sitemap_tree.models.crawl_models import ErrorType, SiteEntry

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = [
    "FetchSuccess",
    "HttpErrorOutcome",
    "TimeoutOutcome",
    "TransportErrorOutcome",
    "FetchOutcome",
    "UrlSetDocument",
    "SitemapIndexDocument",
    "ParseFailure",
    "ParsedDocument",
]

# ==============================================================================
# Fetch outcomes
# ==============================================================================

class FetchSuccess(BaseModel):
    """HTTP 200 with the raw, possibly gzipped, body"""
    kind: Literal["success"] = "success"
    body: bytes
    status_code: int = 200
    content_type: Optional[str] = None

    class Config:
        frozen = True


class HttpErrorOutcome(BaseModel):
    """Response arrived with a status other than 200"""
    kind: Literal["http_error"] = "http_error"
    status_code: int
    message: str
    error_type: Literal[ErrorType.HTTP] = ErrorType.HTTP

    class Config:
        frozen = True


class TimeoutOutcome(BaseModel):
    """Request cancelled because the timer fired first"""
    kind: Literal["timeout"] = "timeout"
    elapsed_ms: int
    message: str
    error_type: Literal[ErrorType.TIMEOUT] = ErrorType.TIMEOUT

    class Config:
        frozen = True


class TransportErrorOutcome(BaseModel):
    """DNS, connection or protocol failure before a usable response"""
    kind: Literal["transport_error"] = "transport_error"
    message: str
    error_name: Optional[str] = None
    error_type: Literal[ErrorType.TRANSPORT] = ErrorType.TRANSPORT

    class Config:
        frozen = True


FetchOutcome = Union[FetchSuccess, HttpErrorOutcome, TimeoutOutcome, TransportErrorOutcome]

# ==============================================================================
# Parsed documents
# ==============================================================================

class UrlSetDocument(BaseModel):
    """Leaf sitemap listing page URLs"""
    kind: Literal["urlset"] = "urlset"
    entries: List[SiteEntry] = Field(default_factory=list)


class SitemapIndexDocument(BaseModel):
    """Internal sitemap listing child sitemap URLs"""
    kind: Literal["sitemapindex"] = "sitemapindex"
    sitemaps: List[str] = Field(default_factory=list)


class ParseFailure(BaseModel):
    """Unparsable XML, or XML that is neither a urlset nor a sitemap index"""
    kind: Literal["parse_error"] = "parse_error"
    error_type: ErrorType = ErrorType.PARSE
    message: str

    class Config:
        frozen = True


ParsedDocument = Union[UrlSetDocument, SitemapIndexDocument, ParseFailure]
