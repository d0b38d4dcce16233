# ==============================================================================
# crawl_models.py — Crawl configuration and result models
# ==============================================================================
# Purpose: Pydantic models shared by the crawl engine and its callers
# Sections: Imports, Enums, Configuration, Results
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Optional

# Third Party -----
from pydantic import BaseModel, Field

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = [
    "ErrorType",
    "CrawlConfig",
    "SiteEntry",
    "ErrorRecord",
    "CrawlResult",
    "SitemapResponse",
    "CrawlSummary",
]

# ==============================================================================
# Enums
# ==============================================================================

class ErrorType(str, Enum):
    """Failure kinds reported in the errors collection"""
    TIMEOUT = "TimeoutError"
    HTTP = "HttpError"
    TRANSPORT = "TransportError"
    PARSE = "ParseError"
    DECOMPRESSION = "DecompressionError"
    UNKNOWN_STATE = "UnknownStateError"
    UNEXPECTED = "UnexpectedError"

# ==============================================================================
# Configuration
# ==============================================================================

class CrawlConfig(BaseModel):
    """Immutable crawl settings shared by every recursive crawl call"""
    url: Optional[str] = None
    timeout: int = Field(default=15000, gt=0, description="Request timeout in milliseconds")
    lastmod: int = Field(default=0, ge=0, description="Minimum lastmod as epoch milliseconds, 0 disables filtering")
    request_headers: Dict[str, str] = Field(default_factory=dict)
    debug: bool = False
    concurrency: int = Field(default=10, ge=1, description="Max sitemap fetches in flight at once")
    retries: int = Field(default=0, ge=0, description="Retry attempts per sitemap after the first failure")
    reject_unauthorized: bool = Field(default=True, description="Verify TLS certificates")

    class Config:
        frozen = True

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000

# ==============================================================================
# Results
# ==============================================================================

class SiteEntry(BaseModel):
    """A single <url> entry from a urlset"""
    loc: str
    lastmod: Optional[datetime] = None

    class Config:
        frozen = True

    def lastmod_ms(self) -> Optional[int]:
        """lastmod as epoch milliseconds, or None when the entry has none."""
        if self.lastmod is None:
            return None
        return int(self.lastmod.timestamp() * 1000)


class ErrorRecord(BaseModel):
    """Terminal failure of one sitemap after its retries ran out"""
    url: str
    type: ErrorType
    message: str
    retries: int = 0

    class Config:
        frozen = True
        use_enum_values = True


class CrawlResult(BaseModel):
    """Files, sites and errors produced by one crawl call and everything below it"""
    files: List[str] = Field(default_factory=list)
    sites: List[str] = Field(default_factory=list)
    errors: List[ErrorRecord] = Field(default_factory=list)

    @classmethod
    def leaf(cls, url: str, sites: List[str]) -> "CrawlResult":
        return cls(files=[url], sites=list(sites))

    @classmethod
    def failure(cls, error: ErrorRecord) -> "CrawlResult":
        return cls(errors=[error])

    @classmethod
    def merge(cls, children: Iterable["CrawlResult"]) -> "CrawlResult":
        """
        Merge child results in order.

        files come from every child. sites come only from children that
        reported no errors, errors only from children that did.
        """
        files: List[str] = []
        sites: List[str] = []
        errors: List[ErrorRecord] = []

        for child in children:
            files.extend(child.files)
            if child.has_errors:
                errors.extend(child.errors)
            else:
                sites.extend(child.sites)

        return cls(files=files, sites=sites, errors=errors)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


class SitemapResponse(BaseModel):
    """Public response of a sitemap fetch"""
    url: Optional[str] = None
    files: List[str] = Field(default_factory=list)
    sites: List[str] = Field(default_factory=list)
    errors: List[ErrorRecord] = Field(default_factory=list)


class CrawlSummary(BaseModel):
    """Counts and timing for a finished crawl"""
    url: Optional[str] = None
    files_found: int
    sites_found: int
    errors_found: int
    processing_time_seconds: float
    timestamp: datetime = Field(default_factory=datetime.now)

    class Config:
        json_encoders = {
            datetime: lambda v: v.isoformat() if v else None
        }
