# ==============================================================================
# concurrency_limiter.py — Shared concurrency gate
# ==============================================================================
# Purpose: Bound the number of sitemap fetches in flight across a traversal
# Sections: Imports, Data Structures, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["LimiterStats", "ConcurrencyLimiter"]

# ==============================================================================
# Data Structures
# ==============================================================================

@dataclass
class LimiterStats:
    """Snapshot of limiter usage"""
    limit: int
    in_flight: int
    peak_in_flight: int
    total_acquired: int

# ==============================================================================
# Main Classes
# ==============================================================================

class ConcurrencyLimiter:
    """
    Counting gate shared by every recursive crawl call of one traversal.

    Slots are held for a single fetch attempt only. Callers must release
    before awaiting child crawls, otherwise nested indexes can starve
    the gate.
    """

    def __init__(self, limit: int):
        """
        Initialize the limiter.

        Args:
            limit: Maximum number of holders at once, must be at least 1
        """
        if limit < 1:
            raise ValueError(f"Concurrency limit must be >= 1, got {limit}")

        self.limit = limit
        self._semaphore = asyncio.Semaphore(limit)

        self.in_flight = 0
        self.peak_in_flight = 0
        self.total_acquired = 0

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Hold one slot for the duration of the block."""
        async with self._semaphore:
            self.in_flight += 1
            self.total_acquired += 1
            self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
            try:
                yield
            finally:
                self.in_flight -= 1

    def get_stats(self) -> LimiterStats:
        """Get current usage statistics."""
        return LimiterStats(
            limit=self.limit,
            in_flight=self.in_flight,
            peak_in_flight=self.peak_in_flight,
            total_acquired=self.total_acquired
        )
