"""Performance repository - monthly metrics time series."""

from loguru import logger

from app.models.performance import BUNDLE_COLUMNS, MetricsBundle
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(BUNDLE_COLUMNS)
_PLACEHOLDERS = ", ".join("?" for _ in BUNDLE_COLUMNS)
_UPSERT = f"INSERT OR REPLACE INTO performance ({_COLUMNS}) VALUES ({_PLACEHOLDERS})"


def _row(bundle: MetricsBundle) -> list:
    return [bundle.data_source.value if c == "data_source" else getattr(bundle, c) for c in BUNDLE_COLUMNS]


class PerformanceRepository(BaseRepository):
    """Repository for per-(district, period) metrics. One current row per key."""

    def upsert(self, bundle: MetricsBundle) -> None:
        """Insert or replace the row for (district_code, period). No-op in read-only mode."""
        if self._read_only:
            logger.debug("Read-only: upsert skipped for {} {}", bundle.district_code, bundle.period)
            return

        self.execute(_UPSERT, _row(bundle))
        logger.debug("Upserted performance {} {}", bundle.district_code, bundle.period)

    def upsert_many(self, bundles: list[MetricsBundle]) -> None:
        """Upsert a batch of bundles. No-op in read-only mode."""
        if self._read_only or not bundles:
            return

        self.executemany(_UPSERT, [_row(b) for b in bundles])
        logger.debug("Upserted {} performance rows", len(bundles))

    def history(self, district_code: str, limit: int) -> list[MetricsBundle]:
        """Most recent rows for a district, newest first."""
        rows = self.fetchdicts(
            f"SELECT {_COLUMNS} FROM performance WHERE district_code = ? ORDER BY period DESC LIMIT ?",
            [district_code, limit],
        )
        return [MetricsBundle.from_dict(r) for r in rows]

    def by_period(self, district_codes: list[str], period: str) -> list[MetricsBundle]:
        """Stored rows for any of the districts in exactly this period."""
        if not district_codes:
            return []

        placeholders = ", ".join("?" for _ in district_codes)
        rows = self.fetchdicts(
            f"""
            SELECT {_COLUMNS} FROM performance
            WHERE district_code IN ({placeholders}) AND period = ?
            ORDER BY district_code
            """,
            [*district_codes, period],
        )
        return [MetricsBundle.from_dict(r) for r in rows]
