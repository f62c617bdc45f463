"""District repositories."""

from app.repositories.district.district import DistrictRepository

__all__ = ["DistrictRepository"]
