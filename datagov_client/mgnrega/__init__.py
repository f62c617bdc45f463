"""MGNREGA API client - district-wise data at a glance."""

from datagov_client.mgnrega.client import MgnregaClient
from datagov_client.mgnrega.schemas import DistrictRecordSchema, ResourceResponseSchema

__all__ = [
    "MgnregaClient",
    "DistrictRecordSchema",
    "ResourceResponseSchema",
]
