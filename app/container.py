"""Dependency Injection container - built once at app startup and passed to handlers."""

from datetime import timedelta

from loguru import logger

from app.repositories.common import CacheRepository
from app.repositories.db import close_db
from app.repositories.district import DistrictRepository
from app.repositories.performance import PerformanceRepository
from app.services.district import DistrictService
from app.services.performance.service import PerformanceService
from datagov_client.mgnrega import MgnregaClient
from settings import CACHE_TTL_HOURS, DB_PATH, READ_ONLY_DB, STATE_NAME


class Container:
    """Application DI container - holds the repositories and services of one process."""

    def __init__(
        self,
        db_path: str = DB_PATH,
        read_only: bool = READ_ONLY_DB,
        client: MgnregaClient | None = None,
        cache_ttl: timedelta = timedelta(hours=CACHE_TTL_HOURS),
        state_name: str = STATE_NAME,
    ):
        self.db_path = db_path
        self.read_only = read_only

        # Repositories share one connection per thread, so they share the read-only flag
        self._district_repo = DistrictRepository(db_path, read_only=read_only)
        self._performance_repo = PerformanceRepository(db_path, read_only=read_only)
        self._cache_repo = CacheRepository(db_path, read_only=read_only)

        self.client = client or MgnregaClient()

        # Services (with injected repos)
        self.districts = DistrictService(district_repo=self._district_repo)
        self.performance = PerformanceService(
            client=self.client,
            district_repo=self._district_repo,
            performance_repo=self._performance_repo,
            cache_repo=self._cache_repo,
            cache_ttl=cache_ttl,
            state_name=state_name,
        )
        logger.info("Container ready: db={}, read_only={}", db_path, read_only)

    @property
    def cache(self) -> CacheRepository:
        return self._cache_repo

    @property
    def performance_repo(self) -> PerformanceRepository:
        return self._performance_repo

    def close(self) -> None:
        """Close this thread's database connection."""
        close_db(self.db_path)
