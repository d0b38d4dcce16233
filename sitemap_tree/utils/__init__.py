# ==============================================================================
# utils/__init__.py — Utils Package
# ==============================================================================
# Purpose: Decompression, concurrency, logging and output helpers
# ==============================================================================

from .concurrency_limiter import ConcurrencyLimiter, LimiterStats
from .decompress import is_gzip, decompress, maybe_decompress
from .json_writer import JsonWriter, build_summary
from .log_config import configure_logging

__all__ = [
    'ConcurrencyLimiter',
    'LimiterStats',
    'is_gzip',
    'decompress',
    'maybe_decompress',
    'JsonWriter',
    'build_summary',
    'configure_logging',
]
