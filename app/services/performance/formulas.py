"""Pure formulas - scoring and period arithmetic, no I/O."""

from datetime import date

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

BASE_SCORE = 60
MAX_SCORE = 100

# (threshold, bonus), checked top-down; value must be strictly greater
HOUSEHOLD_TIERS = [(30000, 20), (20000, 15), (10000, 10), (5000, 5)]
INTENSITY_TIERS = [(25, 20), (20, 15), (15, 10), (10, 5)]


def _tier_bonus(value: float, tiers: list[tuple[float, int]]) -> int:
    for threshold, bonus in tiers:
        if value > threshold:
            return bonus
    return 0


def work_intensity(total_households: int, total_person_days: int) -> float:
    """Person-days per household (0 when no households)."""
    return total_person_days / total_households if total_households > 0 else 0.0


def performance_score(total_households: int, total_person_days: int) -> int:
    """Score in [0, 100]: base 60 + coverage bonus + intensity bonus, capped."""
    score = BASE_SCORE
    score += _tier_bonus(total_households, HOUSEHOLD_TIERS)
    score += _tier_bonus(work_intensity(total_households, total_person_days), INTENSITY_TIERS)
    return max(0, min(score, MAX_SCORE))


def parse_period(period: str) -> tuple[int, int]:
    """'2024-03' -> (2024, 3)."""
    year, month = period.split("-")
    return int(year), int(month)


def financial_year(period: str) -> str:
    """Indian financial year (April-March) containing the period, e.g. '2023-2024' for 2024-03."""
    year, month = parse_period(period)
    start = year if month >= 4 else year - 1
    return f"{start}-{start + 1}"


def month_name(period: str) -> str:
    """'2024-03' -> 'Mar'."""
    return MONTH_NAMES[parse_period(period)[1] - 1]


def months_ago(today: date, months: int) -> str:
    """Period string for the month `months` before today's month."""
    index = today.year * 12 + (today.month - 1) - months
    return f"{index // 12:04d}-{index % 12 + 1:02d}"


def current_period(today: date | None = None) -> str:
    return months_ago(today or date.today(), 0)
