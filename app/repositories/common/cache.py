"""Cache repository - expiring bundle cache storage."""

import json
from datetime import datetime, timedelta

from loguru import logger

from app.errors import PersistenceError
from app.models.performance import MetricsBundle
from app.repositories.base import BaseRepository


class CacheRepository(BaseRepository):
    """Repository for API cache operations. Expiry is checked lazily on read."""

    def get(self, key: str) -> MetricsBundle | None:
        """Load a cached bundle; expired or missing entries return None."""
        row = self.fetchone(
            "SELECT data FROM api_cache WHERE key = ? AND expires_at > ?",
            [key, datetime.now()],
        )
        if not row:
            logger.debug("Cache miss: {}", key)
            return None

        try:
            bundle = MetricsBundle.from_dict(json.loads(row[0]))
        except (ValueError, KeyError, TypeError) as e:
            raise PersistenceError(f"Corrupt cache entry {key}: {e}") from e
        logger.debug("Cache hit: {}", key)
        return bundle

    def set(self, key: str, bundle: MetricsBundle, ttl: timedelta) -> None:
        """Save bundle with expiry now + ttl. No-op in read-only mode."""
        if self._read_only:
            logger.debug("Read-only: cache write skipped for {}", key)
            return

        try:
            json_data = json.dumps(bundle.to_dict())
        except (TypeError, ValueError, AttributeError) as e:
            raise PersistenceError(f"Cannot serialize cache entry {key}: {e}") from e

        now = datetime.now()
        self.execute(
            """
            INSERT OR REPLACE INTO api_cache (key, data, expires_at, computed_at)
            VALUES (?, ?, ?, ?)
            """,
            [key, json_data, now + ttl, now],
        )
        logger.debug("Cache saved: {} (ttl={})", key, ttl)

    def clear(self, prefix: str | None = None) -> None:
        """Clear cache entries matching a key prefix, or all."""
        if self._read_only:
            logger.debug("Read-only: cache clear skipped")
            return

        if prefix:
            self.execute("DELETE FROM api_cache WHERE starts_with(key, ?)", [prefix])
            logger.info("Cache cleared for prefix {}", prefix)
        else:
            self.execute("DELETE FROM api_cache")
            logger.info("All cache cleared")

    def purge_expired(self) -> int:
        """Delete expired entries. Returns number of rows removed."""
        if self._read_only:
            return 0

        now = datetime.now()
        count = self.fetchone("SELECT COUNT(*) FROM api_cache WHERE expires_at <= ?", [now])[0]
        if count:
            self.execute("DELETE FROM api_cache WHERE expires_at <= ?", [now])
            logger.info("Purged {} expired cache entries", count)
        return count
