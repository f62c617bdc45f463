"""data.gov.in API client package."""

from datagov_client.base import BaseClient, UpstreamUnavailable
from datagov_client.mgnrega import MgnregaClient

__all__ = [
    # Base
    "BaseClient",
    "UpstreamUnavailable",
    # Clients
    "MgnregaClient",
]
