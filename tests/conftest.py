"""
Pytest configuration and shared fixtures.
"""

import httpx
import pytest

from app.container import Container
from app.repositories.db import close_db
from datagov_client.base import UpstreamUnavailable
from datagov_client.mgnrega import DistrictRecordSchema, MgnregaClient

TEST_BASE_URL = "https://api.test/resource"


class FakeMgnregaClient:
    """Stands in for MgnregaClient; counts calls and can be told to fail."""

    endpoint = f"{TEST_BASE_URL}/ee03643a-ee4c-48c2-ac30-9f2ff26ab722"

    def __init__(self, records: list[dict] | None = None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    async def district_records(self, state: str, fin_year: str, month: str) -> list[DistrictRecordSchema]:
        self.calls.append((state, fin_year, month))
        if self.error is not None:
            raise self.error
        return [DistrictRecordSchema.model_validate(r) for r in self.records]

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        return None


@pytest.fixture
def ntr_record() -> dict:
    """Upstream row for NTR district (matches AP004 through its alias)."""
    return {
        "district_name": "NTR",
        "state_name": "ANDHRA PRADESH",
        "fin_year": "2023-2024",
        "month": "Mar",
        "Total_Exp": "12.5",
        "Total_Households_Worked": "20000",
        "Persondays_of_Central_Liability_so_far": "450000",
        "Average_days_of_employment_provided_per_Household": "22.5",
        "Average_Wage_rate_per_day_per_person": "245.17",
        "Women_Persondays": "270000",
        "SC_persondays": "90000",
        "ST_persondays": "12000",
        "Number_of_Completed_Works": "1450",
        "Number_of_Ongoing_Works": "NA",
        "Total_Individuals_Worked": "31000",
        "Total_No_of_JobCards_issued": "410000",
        "Total_No_of_HHs_completed_100_Days_of_Wage_Employment": "1200",
        "Differently_abled_persons_worked": "340",
        "percentage_payments_gererated_within_15_days": "98.4",
    }


@pytest.fixture
def db_path(tmp_path):
    """Path to a fresh DuckDB file; connection closed on teardown."""
    path = str(tmp_path / "test.duckdb")
    yield path
    close_db(path)


@pytest.fixture
def fake_client() -> FakeMgnregaClient:
    return FakeMgnregaClient(error=UpstreamUnavailable("offline"))


@pytest.fixture
def container(db_path, fake_client) -> Container:
    """Writable container backed by an offline upstream."""
    return Container(db_path=db_path, read_only=False, client=fake_client)


@pytest.fixture
def mock_upstream():
    """Real MgnregaClient over httpx.MockTransport. Returns (client, requests)."""

    def build(handler):
        requests: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = MgnregaClient(
            base_url=TEST_BASE_URL,
            api_key="test-key",
            transport=httpx.MockTransport(recording),
        )
        return client, requests

    return build


@pytest.fixture
def make_fake_client():
    return FakeMgnregaClient
