from pydantic import BaseModel, Field
from typing import Dict, Optional

class SitemapSource(BaseModel):
    """A named sitemap root from sitemaps.yaml"""
    name: str
    url: str

    # Per-source overrides, None falls back to the environment defaults
    timeout: Optional[int] = Field(default=None, gt=0, description="Request timeout in milliseconds")
    lastmod: Optional[int] = Field(default=None, ge=0, description="Minimum lastmod as epoch milliseconds")
    concurrency: Optional[int] = Field(default=None, ge=1)
    retries: Optional[int] = Field(default=None, ge=0)
    reject_unauthorized: Optional[bool] = None
    debug: Optional[bool] = None
    request_headers: Dict[str, str] = Field(default_factory=dict)

class SitemapSourcesConfig(BaseModel):
    """Complete sitemap sources configuration"""
    sources: Dict[str, SitemapSource] = Field(default_factory=dict)
