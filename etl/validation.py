"""Data validation functions."""

from app.models.performance import DataSource
from app.repositories.performance import PerformanceRepository


def validate_period(repo: PerformanceRepository, district_codes: list[str], period: str) -> dict:
    """Check stored coverage for a period."""
    issues = []
    stats = {}

    rows = repo.by_period(district_codes, period)
    stored = {r.district_code for r in rows}
    stats["districts"] = len(district_codes)
    stats["stored"] = len(rows)

    missing = [c for c in district_codes if c not in stored]
    stats["missing"] = missing
    if missing:
        issues.append(f"{len(missing)} districts have no stored data: {', '.join(missing)}")

    synthetic = sum(1 for r in rows if r.data_source is DataSource.SYNTHETIC)
    stats["synthetic"] = synthetic
    stats["synthetic_pct"] = round(synthetic / len(rows) * 100, 1) if rows else 0
    if synthetic:
        issues.append(f"{synthetic} districts are backed by synthetic data")

    out_of_range = [r.district_code for r in rows if not 0 <= r.performance_score <= 100]
    if out_of_range:
        issues.append(f"Scores out of range for: {', '.join(out_of_range)}")

    return {
        "period": period,
        "valid": not missing and not out_of_range,
        "stats": stats,
        "issues": issues,
    }
