"""Performance domain models - metrics bundles and comparison rows."""

from app.models.performance.entities import (
    AMOUNT_UNIT,
    BUNDLE_COLUMNS,
    CRORE,
    ComparisonRow,
    DataSource,
    DataSourceInfo,
    MetricsBundle,
)
from app.models.performance.performance import PERFORMANCE_DDL, PERFORMANCE_INDEXES

__all__ = [
    "PERFORMANCE_DDL",
    "PERFORMANCE_INDEXES",
    "MetricsBundle",
    "ComparisonRow",
    "DataSource",
    "DataSourceInfo",
    "BUNDLE_COLUMNS",
    "AMOUNT_UNIT",
    "CRORE",
]
