"""Refresh orchestration - what the scheduler runs every few hours."""

import asyncio

from loguru import logger

from app.container import Container
from app.models.district import District
from app.models.performance import DataSource
from app.services.performance.service import PerformanceService, cache_key
from etl.validation import validate_period


async def refresh_period(
    service: PerformanceService,
    districts: list[District],
    period: str,
) -> dict:
    """Fetch every district for a period through the service (cache + history)."""
    logger.info("Refreshing {} districts for {}", len(districts), period)
    stats = {"period": period, "upstream": 0, "synthetic": 0, "failed": []}

    for d in districts:
        try:
            bundle = await service.fetch_district_performance(d.code, period)
        except Exception as e:
            logger.error("Failed to refresh {} ({}): {}", d.name, d.code, e)
            stats["failed"].append(d.code)
            continue

        key = "upstream" if bundle.data_source is DataSource.UPSTREAM else "synthetic"
        stats[key] += 1
        logger.info("Fetched data for {} ({})", d.name, bundle.data_source.value)

    return stats


async def _refresh_async(container: Container, periods: list[str], force: bool) -> list[dict]:
    districts = container.districts.list_districts()
    results = []

    async with container.client:
        for period in periods:
            if force:
                for d in districts:
                    container.cache.clear(cache_key(d.code, period))
            results.append(await refresh_period(container.performance, districts, period))

    purged = container.cache.purge_expired()
    logger.info("Refresh complete! ({} expired cache entries purged)", purged)
    return results


def refresh_all(container: Container, periods: list[str], force: bool = False) -> list[dict]:
    """Main refresh entry point."""
    return asyncio.run(_refresh_async(container, periods, force))


def validate_all(container: Container, periods: list[str]) -> list[dict]:
    """Coverage report for each period."""
    codes = [d.code for d in container.districts.list_districts()]
    return [validate_period(container.performance_repo, codes, p) for p in periods]
