"""District services."""

from app.services.district.service import DistrictService

__all__ = ["DistrictService"]
