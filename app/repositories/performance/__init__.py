"""Performance repositories."""

from app.repositories.performance.performance import PerformanceRepository

__all__ = ["PerformanceRepository"]
