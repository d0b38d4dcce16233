# ==============================================================================
# json_writer.py — JSON Writer
# ==============================================================================
# Purpose: Writes crawl results to output/ in user-friendly manner
# Sections: Imports, Public API
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
from pathlib import Path
from datetime import datetime
import json
from typing import Optional

# Sitemap Tree ----
from sitemap_tree.models.crawl_models import CrawlSummary, SitemapResponse

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = [
    'JsonWriter',
    'build_summary',
]

# ==============================================================================
# Public API
# ==============================================================================

def build_summary(response: SitemapResponse, processing_time_seconds: float) -> CrawlSummary:
    """Summarize a sitemap response."""
    return CrawlSummary(
        url=response.url,
        files_found=len(response.files),
        sites_found=len(response.sites),
        errors_found=len(response.errors),
        processing_time_seconds=processing_time_seconds
    )


class JsonWriter:
    """Handles JSON file writing operations for crawl output."""

    def __init__(self, output_base_dir: Optional[Path] = None):
        """Initialize JsonWriter with optional custom output directory."""
        if output_base_dir is None:
            self.output_base_dir = _get_project_root() / "output"
        else:
            self.output_base_dir = Path(output_base_dir)

        self._ensure_directory_exists(self.output_base_dir)

    def create_source_directory(self, source_id: str) -> Path:
        """Create timestamped directory for one crawl's results."""
        timestamp = self._format_timestamp(datetime.now())

        directory_name = f"{source_id}_{timestamp}"
        full_directory_path = self.output_base_dir / directory_name

        self._ensure_directory_exists(full_directory_path)

        return full_directory_path

    def write_result(
        self,
        source_id: str,
        response: SitemapResponse,
        summary: Optional[CrawlSummary] = None,
        filename: str = "sitemap_result.json"
    ) -> Path:
        """Write a sitemap response, and its summary if given, to a fresh directory."""
        directory = self.create_source_directory(source_id)
        file_path = directory / filename

        with open(file_path, "w", encoding="utf-8") as file:
            file.write(response.model_dump_json(indent=2))

        if summary is not None:
            self.write_summary(directory, source_id, summary)

        return file_path

    def write_summary(self, directory: Path, source_id: str, summary: CrawlSummary, filename: str = "crawl_summary.json") -> Path:
        """Write crawl summary with counts and timing."""
        file_path = directory / filename

        summary_data = {
            "source_id": source_id,
            "generated_at": datetime.now().isoformat(),
            **summary.model_dump(mode="json")
        }

        with open(file_path, "w", encoding="utf-8") as file:
            json.dump(summary_data, file, indent=2, ensure_ascii=False)

        return file_path

    def _ensure_directory_exists(self, directory: Path) -> None:
        """Ensure output directory exists, create if necessary."""
        directory.mkdir(parents=True, exist_ok=True)

    def _format_timestamp(self, dt: datetime) -> str:
        """Format datetime for directory naming."""
        return dt.strftime("%Y%m%d_%H%M%S")

# ==============================================================================
# Helper Functions
# ==============================================================================
def _get_project_root() -> Path:
    """Get the project root directory"""
    return Path(__file__).parent.parent.parent
