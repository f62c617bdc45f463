"""Base repository class."""

from collections.abc import Callable
from typing import Any

import duckdb
from loguru import logger

from app.errors import PersistenceError
from app.repositories.db import get_db
from settings import DB_PATH


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, db_path: str = DB_PATH, read_only: bool = True):
        self._db = get_db(db_path, read_only)
        self._read_only = read_only
        self._cache: dict[str, Any] = {}
        logger.debug("{} initialized (read_only={})", self.__class__.__name__, read_only)

    @property
    def read_only(self) -> bool:
        return self._read_only

    def _cached(self, key: str, fn: Callable[[], Any]) -> Any:
        """Get from cache or compute."""
        if key not in self._cache:
            self._cache[key] = fn()
            logger.debug("Cache miss: {}", key)
        return self._cache[key]

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        try:
            if params:
                return self._db.execute(query, params)
            return self._db.execute(query)
        except duckdb.Error as e:
            raise PersistenceError(f"{e.__class__.__name__}: {e}") from e

    def executemany(self, query: str, rows: list[list]) -> None:
        """Execute SQL statement for each parameter row."""
        try:
            self._db.executemany(query, rows)
        except duckdb.Error as e:
            raise PersistenceError(f"{e.__class__.__name__}: {e}") from e

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def fetchdicts(self, query: str, params: list | None = None) -> list[dict]:
        """Execute and fetch all rows as column-name dicts."""
        cursor = self.execute(query, params)
        columns = [c[0] for c in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]
