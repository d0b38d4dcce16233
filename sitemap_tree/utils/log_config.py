# ==============================================================================
# log_config.py — Logging setup
# ==============================================================================
# Purpose: Configure stdlib logging for the API and script entry points
# ==============================================================================

# Standard Library -----
import logging

__all__ = ["LOG_FORMAT", "configure_logging"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Apply a root log level by name, unknown names fall back to INFO."""
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("sitemap_tree").setLevel(resolved)
