"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository
from app.repositories.db import (
    close_db,
    get_db,
    init_tables,
)
from app.repositories.district import DistrictRepository
from app.repositories.performance import PerformanceRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "CacheRepository",
    # District
    "DistrictRepository",
    # Performance
    "PerformanceRepository",
]
