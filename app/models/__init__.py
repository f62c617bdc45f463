"""Models package - DDL and entities for all domains."""

from app.models.common import CACHE_DDL, BaseEntity
from app.models.district import ANDHRA_PRADESH_DISTRICTS, DISTRICT_DDL, District
from app.models.performance import (
    PERFORMANCE_DDL,
    PERFORMANCE_INDEXES,
    ComparisonRow,
    DataSource,
    DataSourceInfo,
    MetricsBundle,
)

ALL_DDL = [
    # District
    DISTRICT_DDL,
    # Performance
    PERFORMANCE_DDL,
    *PERFORMANCE_INDEXES,
    # Common
    CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHE_DDL",
    # District
    "DISTRICT_DDL",
    "District",
    "ANDHRA_PRADESH_DISTRICTS",
    # Performance
    "PERFORMANCE_DDL",
    "MetricsBundle",
    "ComparisonRow",
    "DataSource",
    "DataSourceInfo",
    # All DDL
    "ALL_DDL",
]
