"""District domain models - canonical localities."""

from app.models.district.district import DISTRICT_DDL
from app.models.district.entities import ANDHRA_PRADESH_DISTRICTS, District

__all__ = [
    "DISTRICT_DDL",
    "District",
    "ANDHRA_PRADESH_DISTRICTS",
]
