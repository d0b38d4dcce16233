# ==============================================================================
# sitemap_router.py — Sitemap crawl endpoints
# ==============================================================================
# Purpose: Handle sitemap crawl API endpoints
# Sections: Imports, Dependencies, Router definition
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
from typing import Dict, Optional

# Third Party -----
from fastapi import APIRouter, Depends, HTTPException, Query

# Sitemap Tree ----
from sitemap_tree.models.crawl_models import SitemapResponse
from sitemap_tree.services.sitemap_service import SitemapService

# ==============================================================================
# Dependencies
# ==============================================================================

def get_sitemap_service() -> SitemapService:
    """Service instance per request, overridable in tests"""
    return SitemapService()

# ==============================================================================
# Router definition
# ==============================================================================

router = APIRouter(prefix="/api/v1", tags=["sitemaps"])

@router.get("/sources")
def list_sources(service: SitemapService = Depends(get_sitemap_service)):
    """List all configured sitemap sources from sitemaps.yaml"""
    try:
        sources = service.config.all_sources
    except (FileNotFoundError, ValueError) as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {
        source_id: {
            "name": source.name,
            "url": source.url,
            "concurrency": source.concurrency,
            "retries": source.retries,
            "lastmod": source.lastmod,
        }
        for source_id, source in sources.items()
    }

@router.get("/sitemap", response_model=SitemapResponse)
async def crawl_sitemap(
    url: str = Query(..., description="Root sitemap URL"),
    timeout: Optional[int] = Query(None, gt=0, description="Request timeout in milliseconds"),
    lastmod: Optional[int] = Query(None, ge=0, description="Minimum lastmod as epoch milliseconds"),
    concurrency: Optional[int] = Query(None, ge=1),
    retries: Optional[int] = Query(None, ge=0),
    service: SitemapService = Depends(get_sitemap_service)
):
    """Crawl an ad-hoc sitemap URL"""
    return await service.crawl_url(
        url,
        timeout=timeout,
        lastmod=lastmod,
        concurrency=concurrency,
        retries=retries
    )

@router.post("/sources/{source_id}/crawl")
async def crawl_source(source_id: str, service: SitemapService = Depends(get_sitemap_service)) -> Dict:
    """Crawl a configured source, or every source when source_id is 'all'"""
    try:
        if source_id == "all":
            results = await service.crawl_all_sources()
            return {sid: response.model_dump(mode="json") for sid, response in results.items()}

        if not service.config.source(source_id):
            raise HTTPException(
                status_code=404,
                detail=f"Sitemap source {source_id} not found in configuration. Add it to sitemaps.yaml, see sitemaps_example.yaml for reference."
            )

        response = await service.crawl_source(source_id)
        return response.model_dump(mode="json")

    except (FileNotFoundError, ValueError) as e:
        raise HTTPException(status_code=500, detail=str(e))
