"""Services package - service class exports."""

from app.services.district import DistrictService
from app.services.performance.service import PerformanceService

__all__ = [
    "DistrictService",
    "PerformanceService",
]
