"""Deterministic synthetic bundles for when upstream data is unavailable."""

import zlib

import numpy as np

from app.models.district import District
from app.models.performance import CRORE, DataSource, MetricsBundle
from app.services.performance.formulas import financial_year, month_name, performance_score


def period_seed(district_code: str, period: str) -> int:
    """Stable seed for (district, period). CRC32, so it is identical across processes."""
    return zlib.crc32(f"{district_code}:{period}".encode())


def generate_bundle(district: District, period: str) -> MetricsBundle:
    """Plausible, internally consistent bundle. Same inputs, same output."""
    rng = np.random.default_rng(period_seed(district.code, period))

    def draw(low: int, high: int) -> int:
        return int(rng.integers(low, high, endpoint=True))

    # Draw order is part of the output contract
    households = draw(15000, 45000)
    avg_days = draw(18, 28)
    wage_rate = draw(200, 250)
    completed_works = draw(50, 200)
    ongoing_works = draw(100, 300)
    payment_within_15_days = draw(75, 95)

    person_days = households * avg_days
    amount_rupees = person_days * wage_rate

    return MetricsBundle(
        district_code=district.code,
        district_name=district.name,
        period=period,
        total_households=households,
        total_person_days=person_days,
        total_amount_spent=round(amount_rupees / CRORE, 4),
        avg_days_per_household=float(avg_days),
        avg_amount_per_household=round(amount_rupees / households, 2),
        performance_score=performance_score(households, person_days),
        data_source=DataSource.SYNTHETIC,
        financial_year=financial_year(period),
        month=month_name(period),
        average_wage_rate=float(wage_rate),
        women_persondays=int(person_days * 0.4),
        sc_persondays=int(person_days * 0.15),
        st_persondays=int(person_days * 0.08),
        completed_works=completed_works,
        ongoing_works=ongoing_works,
        total_individuals_worked=int(households * 1.2),
        total_job_cards=int(households * 1.1),
        households_100_days=int(households * 0.15),
        differently_abled_worked=int(households * 0.02),
        payment_within_15_days=float(payment_within_15_days),
    )
