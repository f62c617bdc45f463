"""Performance acquisition service - cache, upstream fetch, matching, scoring, fallback."""

from dataclasses import replace
from datetime import date, datetime, timedelta

from loguru import logger

from app.errors import (
    NoMatchError,
    PersistenceError,
    UpstreamUnavailable,
    ValidationError,
    validate_period,
)
from app.models.district import District
from app.models.performance import (
    CRORE,
    ComparisonRow,
    DataSource,
    DataSourceInfo,
    MetricsBundle,
)
from app.repositories.common import CacheRepository
from app.repositories.district import DistrictRepository
from app.repositories.performance import PerformanceRepository
from app.services.performance import formulas
from app.services.performance.matcher import match_records
from app.services.performance.synthetic import generate_bundle
from datagov_client.mgnrega import DistrictRecordSchema, MgnregaClient
from settings import CACHE_TTL_HOURS, HISTORY_MONTHS, MAX_HISTORY_MONTHS, STATE_NAME


def cache_key(district_code: str, period: str) -> str:
    return f"district_{district_code}_{period}"


def bundle_from_record(record: DistrictRecordSchema, district: District, period: str) -> MetricsBundle:
    """Build an upstream bundle from a matched row. Total_Exp is reported in crore.

    Average days falls back to person-days per household when the column is absent.
    """
    households = record.households_worked
    amount = record.total_exp
    return MetricsBundle(
        district_code=district.code,
        district_name=district.name,
        period=period,
        total_households=households,
        total_person_days=record.persondays,
        total_amount_spent=amount,
        avg_days_per_household=record.avg_days or round(formulas.work_intensity(households, record.persondays), 2),
        avg_amount_per_household=round(amount * CRORE / households, 2) if households > 0 else 0.0,
        performance_score=formulas.performance_score(households, record.persondays),
        data_source=DataSource.UPSTREAM,
        financial_year=record.fin_year or formulas.financial_year(period),
        month=record.month or formulas.month_name(period),
        average_wage_rate=record.wage_rate,
        women_persondays=record.women_persondays,
        sc_persondays=record.sc_persondays,
        st_persondays=record.st_persondays,
        completed_works=record.completed_works,
        ongoing_works=record.ongoing_works,
        total_individuals_worked=record.individuals_worked,
        total_job_cards=record.job_cards,
        households_100_days=record.households_100_days,
        differently_abled_worked=record.differently_abled_worked,
        payment_within_15_days=record.payment_within_15_days,
    )


class PerformanceService:
    """District performance with DB caching and synthetic fallback.

    Every fetch ends with a bundle: a cache hit, a matched upstream row, or a
    deterministic synthetic substitute. Only invalid caller input raises.
    """

    def __init__(
        self,
        client: MgnregaClient,
        district_repo: DistrictRepository,
        performance_repo: PerformanceRepository,
        cache_repo: CacheRepository,
        cache_ttl: timedelta = timedelta(hours=CACHE_TTL_HOURS),
        state_name: str = STATE_NAME,
    ):
        self._client = client
        self._districts = district_repo
        self._performance = performance_repo
        self._cache = cache_repo
        self._ttl = cache_ttl
        self._state = state_name
        logger.debug("PerformanceService initialized (ttl={})", cache_ttl)

    def _require_district(self, district_code: str) -> District:
        district = self._districts.get(district_code)
        if district is None:
            raise ValidationError(f"Unknown district code: {district_code!r}")
        return district

    def _read_cache(self, key: str) -> MetricsBundle | None:
        try:
            return self._cache.get(key)
        except PersistenceError as e:
            logger.warning("Cache read failed for {}, treating as miss: {}", key, e)
            return None

    def _store(self, key: str, bundle: MetricsBundle) -> None:
        try:
            self._cache.set(key, bundle, self._ttl)
        except PersistenceError as e:
            logger.warning("Cache write failed for {}: {}", key, e)
        try:
            self._performance.upsert(bundle)
        except PersistenceError as e:
            logger.warning("History write failed for {} {}: {}", bundle.district_code, bundle.period, e)

    async def _fetch_upstream(self, district: District, period: str) -> MetricsBundle:
        fin_year = formulas.financial_year(period)
        month = formulas.month_name(period)
        logger.info("Fetching MGNREGA data for {} {} ({}, {})", district.code, period, fin_year, month)

        records = await self._client.district_records(self._state, fin_year, month)
        record = match_records(records, district)[0]
        return bundle_from_record(record, district, period)

    async def fetch_district_performance(self, district_code: str, period: str) -> MetricsBundle:
        """Bundle for (district, period): cache, else upstream, else synthetic."""
        validate_period(period)
        district = self._require_district(district_code)

        key = cache_key(district_code, period)
        cached = self._read_cache(key)
        if cached is not None:
            return cached

        try:
            bundle = await self._fetch_upstream(district, period)
        except (UpstreamUnavailable, NoMatchError) as e:
            logger.warning("Upstream data unavailable for {} {}, using synthetic data: {}", district_code, period, e)
            bundle = generate_bundle(district, period)
        except Exception:
            logger.exception("Unexpected error fetching {} {}, using synthetic data", district_code, period)
            bundle = generate_bundle(district, period)

        bundle = replace(bundle, last_updated=datetime.now())
        self._store(key, bundle)
        return bundle

    async def fetch_history(
        self,
        district_code: str,
        months: int = HISTORY_MONTHS,
        today: date | None = None,
    ) -> list[MetricsBundle]:
        """Exactly `months` bundles ending at the current month, oldest first."""
        if not 1 <= months <= MAX_HISTORY_MONTHS:
            raise ValidationError(f"Invalid months: {months}. Must be between 1 and {MAX_HISTORY_MONTHS}")
        district = self._require_district(district_code)
        today = today or date.today()

        history = []
        synthetic = 0
        for i in range(months):
            period = formulas.months_ago(today, i)
            try:
                bundle = await self.fetch_district_performance(district_code, period)
            except Exception as e:
                logger.warning("Failed to fetch {} {}, substituting synthetic data: {}", district_code, period, e)
                bundle = replace(generate_bundle(district, period), last_updated=datetime.now())
            if bundle.data_source is DataSource.SYNTHETIC:
                synthetic += 1
            history.append(bundle)

        logger.info(
            "History for {}: {} upstream, {} synthetic",
            district_code,
            months - synthetic,
            synthetic,
        )
        history.reverse()
        return history

    async def compare_districts(self, district_codes: list[str], period: str) -> list[ComparisonRow]:
        """One row per district that could be fetched; failures are left out."""
        if not district_codes:
            raise ValidationError("At least one district code required")
        validate_period(period)

        rows = []
        for code in district_codes:
            try:
                bundle = await self.fetch_district_performance(code, period)
            except Exception as e:
                logger.warning("Failed to fetch comparison data for {}: {}", code, e)
                continue
            rows.append(ComparisonRow.from_bundle(bundle))

        logger.info("Comparison for {}: {}/{} districts", period, len(rows), len(district_codes))
        return rows

    def stored_history(self, district_code: str, limit: int = HISTORY_MONTHS) -> list[MetricsBundle]:
        """Persisted rows only, newest first. No fetching."""
        self._require_district(district_code)
        return self._performance.history(district_code, limit)

    def data_source_info(self) -> DataSourceInfo:
        """Static description of the upstream provider."""
        return DataSourceInfo(
            name="data.gov.in",
            description="District-wise MGNREGA Data at a Glance",
            ministry="Ministry of Rural Development",
            department="Department of Rural Development (DRD)",
            api_endpoint=self._client.endpoint,
            features=[
                "District-wise MGNREGA performance metrics from the Government of India",
                f"Cached responses with a {int(self._ttl.total_seconds() // 3600)}-hour lifetime",
                "Deterministic synthetic data when the API is unavailable",
                "Performance scoring from household coverage and work intensity",
            ],
        )
