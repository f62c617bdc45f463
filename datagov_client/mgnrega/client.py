"""MGNREGA API client."""

import httpx
import pydantic
from loguru import logger

from datagov_client.base import BaseClient, UpstreamUnavailable
from datagov_client.mgnrega.schemas import DistrictRecordSchema, ResourceResponseSchema
from settings import API_PAGE_LIMIT, API_RESOURCE_ID


class MgnregaClient(BaseClient):
    """Client for the district-wise MGNREGA resource."""

    resource_id = API_RESOURCE_ID

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/{self.resource_id}"

    async def district_records(self, state: str, fin_year: str, month: str) -> list[DistrictRecordSchema]:
        """GET /resource/{id} filtered by state, financial year and month name."""
        params = {
            "limit": API_PAGE_LIMIT,
            "filters[state_name]": state.upper(),
            "filters[fin_year]": fin_year,
            "filters[month]": month,
        }
        logger.debug("Fetching MGNREGA records: state={}, fin_year={}, month={}", state, fin_year, month)
        try:
            data = await self._get(self.resource_id, params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise UpstreamUnavailable(f"MGNREGA request failed: {e.__class__.__name__}: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailable(f"MGNREGA response is not JSON: {e}") from e

        try:
            response = ResourceResponseSchema.model_validate(data)
        except pydantic.ValidationError as e:
            raise UpstreamUnavailable(f"MGNREGA response malformed: {e.error_count()} errors") from e

        logger.debug("Received {} MGNREGA records", len(response.records))
        return response.records
