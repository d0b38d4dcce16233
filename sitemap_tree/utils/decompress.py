# ==============================================================================
# decompress.py — Gzip payload handling
# ==============================================================================
# Purpose: Detect gzip-compressed sitemap bodies (.xml.gz) and inflate them
# Sections: Imports, Public API
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import asyncio
import gzip
import zlib

# Sitemap Tree ----
from sitemap_tree.exceptions import DecompressionError

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["GZIP_MAGIC", "is_gzip", "decompress", "maybe_decompress"]

GZIP_MAGIC = b"\x1f\x8b"

# ==============================================================================
# Public API
# ==============================================================================

def is_gzip(data: bytes) -> bool:
    """Check the gzip magic header."""
    return bool(data) and data[:2] == GZIP_MAGIC


def decompress(data: bytes) -> bytes:
    """Inflate a gzip payload, raising DecompressionError when it is corrupt."""
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise DecompressionError(str(e) or e.__class__.__name__) from e


async def maybe_decompress(data: bytes) -> bytes:
    """Return the inflated payload if gzipped, otherwise the input unchanged."""
    if not is_gzip(data):
        return data

    # Large sitemaps can take a while to inflate, keep it off the event loop
    return await asyncio.to_thread(decompress, data)
