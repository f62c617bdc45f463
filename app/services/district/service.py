"""District service - registry lookups and location-based detection."""

import math

from app.errors import ValidationError, validate_coordinates
from app.models.district import District
from app.repositories.district import DistrictRepository

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


class DistrictService:
    """District registry business logic."""

    def __init__(self, district_repo: DistrictRepository):
        self._districts = district_repo

    def list_districts(self) -> list[District]:
        return self._districts.list_districts()

    def get_district(self, code: str) -> District:
        district = self._districts.get(code)
        if district is None:
            raise ValidationError(f"Unknown district code: {code!r}")
        return district

    def detect_nearest(self, latitude, longitude) -> District:
        """District whose seeded centre is closest to the coordinates."""
        lat, lon = validate_coordinates(latitude, longitude)
        districts = self.list_districts()
        if not districts:
            raise ValidationError("No districts registered")
        return min(districts, key=lambda d: haversine_km(lat, lon, d.latitude, d.longitude))
