"""District entity and the seed list for the reference deployment."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class District(BaseEntity):
    """Canonical district. Seeded once, read-only afterwards."""

    code: str
    name: str
    state_name: str
    latitude: float
    longitude: float


ANDHRA_PRADESH = "Andhra Pradesh"

ANDHRA_PRADESH_DISTRICTS = [
    District("AP001", "Anantapur", ANDHRA_PRADESH, 14.6819, 77.6006),
    District("AP002", "Chittoor", ANDHRA_PRADESH, 13.2156, 79.1004),
    District("AP003", "East Godavari", ANDHRA_PRADESH, 16.9454, 82.2382),
    District("AP004", "Guntur", ANDHRA_PRADESH, 16.3067, 80.4365),
    District("AP005", "Krishna", ANDHRA_PRADESH, 16.1667, 81.1333),
    District("AP006", "Kurnool", ANDHRA_PRADESH, 15.8300, 78.0500),
    District("AP007", "Nellore", ANDHRA_PRADESH, 14.4415, 79.9864),
    District("AP008", "Prakasam", ANDHRA_PRADESH, 15.5067, 79.3200),
    District("AP009", "Srikakulam", ANDHRA_PRADESH, 18.2989, 83.8975),
    District("AP010", "Visakhapatnam", ANDHRA_PRADESH, 17.6868, 83.2185),
    District("AP011", "Vizianagaram", ANDHRA_PRADESH, 18.1167, 83.4167),
    District("AP012", "West Godavari", ANDHRA_PRADESH, 16.9454, 81.2382),
    District("AP013", "YSR Kadapa", ANDHRA_PRADESH, 14.4667, 78.8167),
]
