# ==============================================================================
# test_concurrency_limiter.py — Concurrency gate tests
# ==============================================================================
# Purpose: Test that the shared limiter bounds holders and tracks usage
# Sections: Imports, Test functions
# ==============================================================================

# Standard Library -----
import asyncio

# Third Party -----
import pytest

# Sitemap Tree ----
from sitemap_tree.utils.concurrency_limiter import ConcurrencyLimiter

# ==============================================================================
# Test functions
# ==============================================================================

async def test_limiter_never_exceeds_limit():
    limiter = ConcurrencyLimiter(3)
    observed = []

    async def worker():
        async with limiter.slot():
            observed.append(limiter.in_flight)
            await asyncio.sleep(0.01)

    await asyncio.gather(*(worker() for _ in range(12)))

    stats = limiter.get_stats()
    assert max(observed) <= 3
    assert stats.peak_in_flight == 3
    assert stats.total_acquired == 12
    assert stats.in_flight == 0


async def test_slot_is_released_when_block_raises():
    limiter = ConcurrencyLimiter(1)

    with pytest.raises(RuntimeError):
        async with limiter.slot():
            raise RuntimeError("boom")

    async with limiter.slot():
        assert limiter.in_flight == 1
    assert limiter.in_flight == 0


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        ConcurrencyLimiter(0)
