"""Performance domain entities - monthly metrics bundles and derived views."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any

from app.models.common import BaseEntity

CRORE = 10_000_000
AMOUNT_UNIT = "INR crore"


class DataSource(str, Enum):
    """Provenance of a bundle."""

    UPSTREAM = "upstream"
    SYNTHETIC = "synthetic"


@dataclass
class MetricsBundle(BaseEntity):
    """All metrics for one (district, period).

    ``total_amount_spent`` is always in ``amount_unit`` (crore);
    ``avg_amount_per_household`` is always in rupees.
    """

    district_code: str
    district_name: str
    period: str
    total_households: int
    total_person_days: int
    total_amount_spent: float
    avg_days_per_household: float
    avg_amount_per_household: float
    performance_score: int
    data_source: DataSource
    financial_year: str
    month: str
    average_wage_rate: float = 0.0
    women_persondays: int = 0
    sc_persondays: int = 0
    st_persondays: int = 0
    completed_works: int = 0
    ongoing_works: int = 0
    total_individuals_worked: int = 0
    total_job_cards: int = 0
    households_100_days: int = 0
    differently_abled_worked: int = 0
    payment_within_15_days: float = 0.0
    amount_unit: str = AMOUNT_UNIT
    last_updated: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe dict: enum as value, timestamp as ISO string."""
        data = super().to_dict()
        data["data_source"] = self.data_source.value
        data["last_updated"] = self.last_updated.isoformat() if self.last_updated else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MetricsBundle":
        data = dict(data)
        data["data_source"] = DataSource(data["data_source"])
        updated = data.get("last_updated")
        if isinstance(updated, str):
            data["last_updated"] = datetime.fromisoformat(updated)
        return super().from_dict(data)


BUNDLE_COLUMNS = [f.name for f in fields(MetricsBundle)]


@dataclass
class ComparisonRow(BaseEntity):
    """Side-by-side comparison subset of a bundle."""

    district_code: str
    district_name: str
    period: str
    total_households: int
    total_person_days: int
    total_amount_spent: float
    amount_unit: str
    avg_days_per_household: float
    performance_score: int
    data_source: str

    @classmethod
    def from_bundle(cls, bundle: MetricsBundle) -> "ComparisonRow":
        return cls(
            district_code=bundle.district_code,
            district_name=bundle.district_name,
            period=bundle.period,
            total_households=bundle.total_households,
            total_person_days=bundle.total_person_days,
            total_amount_spent=bundle.total_amount_spent,
            amount_unit=bundle.amount_unit,
            avg_days_per_household=bundle.avg_days_per_household,
            performance_score=bundle.performance_score,
            data_source=bundle.data_source.value,
        )


@dataclass
class DataSourceInfo(BaseEntity):
    """Static description of the upstream provider."""

    name: str
    description: str
    ministry: str
    department: str
    api_endpoint: str
    features: list[str] = field(default_factory=list)
