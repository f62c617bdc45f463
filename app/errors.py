"""Domain errors and input validation helpers."""

import re

from datagov_client.base import UpstreamUnavailable


class MgnregaError(Exception):
    """Base class for tracker errors."""

    def __init__(self, message: str = "MGNREGA tracker error"):
        self.message = message
        super().__init__(self.message)


class NoMatchError(MgnregaError):
    """Upstream returned rows but none belongs to the requested district."""

    def __init__(self, district_code: str, district_name: str, labels: list[str]):
        self.district_code = district_code
        self.district_name = district_name
        self.labels = labels
        seen = ", ".join(labels) if labels else "none"
        super().__init__(f"No data found for district {district_code} ({district_name}); upstream labels: {seen}")


class PersistenceError(MgnregaError):
    """Store read or write failed."""

    def __init__(self, message: str = "Persistence error"):
        super().__init__(message)


class ValidationError(MgnregaError):
    """Caller input is missing or malformed."""

    def __init__(self, message: str = "Validation error"):
        super().__init__(message)


_PERIOD_RE = re.compile(r"^(\d{4})-(\d{2})$")


def validate_period(period: str) -> None:
    """Validate a YYYY-MM period string."""
    match = _PERIOD_RE.match(period or "")
    if not match or not 1 <= int(match.group(2)) <= 12:
        raise ValidationError(f"Invalid period: {period!r}. Expected YYYY-MM")


def validate_coordinates(latitude, longitude) -> tuple[float, float]:
    """Validate and coerce a latitude/longitude pair."""
    if latitude is None or longitude is None:
        raise ValidationError("Latitude and longitude required")
    try:
        lat, lon = float(latitude), float(longitude)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid coordinates: {latitude!r}, {longitude!r}") from e
    if not -90 <= lat <= 90 or not -180 <= lon <= 180:
        raise ValidationError(f"Coordinates out of range: {lat}, {lon}")
    return lat, lon


__all__ = [
    "MgnregaError",
    "UpstreamUnavailable",
    "NoMatchError",
    "PersistenceError",
    "ValidationError",
    "validate_period",
    "validate_coordinates",
]
