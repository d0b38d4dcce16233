from fastapi import FastAPI
from sitemap_tree import __version__
from sitemap_tree.routers import sitemap_router
from sitemap_tree.services.config_service import config_service
from sitemap_tree.utils.log_config import configure_logging

configure_logging(config_service.log_level)

app = FastAPI(
    title="Sitemap Tree API",
    description="API for crawling sitemap trees and collecting their page URLs",
    version=__version__
)

# include routers
app.include_router(sitemap_router)

@app.get("/")
def read_root():
    """Health check endpoint"""
    return {"message": "Sitemap Tree API is running", "status": "healthy"}

@app.get("/health")
def health_check():
    """Detailed health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "sitemap-tree"
    }
