#!/usr/bin/env python3
"""
Refresh MGNREGA data from data.gov.in into the cache and history tables.

Usage:
    python refresh_data.py                   # Refresh current month
    python refresh_data.py 2024-03 2024-02   # Refresh specific months
    python refresh_data.py --history 12      # Refresh the last 12 months
    python refresh_data.py --force           # Ignore cached entries
    python refresh_data.py --validate        # Check stored coverage only
"""

import sys
from datetime import date
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import Container
from app.errors import ValidationError, validate_period
from app.services.performance.formulas import months_ago
from etl import refresh_all, validate_all
from settings import READ_ONLY_DB
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def print_report(reports: list[dict]) -> bool:
    print("\n" + "=" * 60)
    print("DATA COVERAGE REPORT")
    print("=" * 60)

    all_valid = True
    for report in reports:
        status = "OK" if report["valid"] else "INCOMPLETE"
        stats = report["stats"]
        print(f"\nPeriod {report['period']} [{status}]")
        print(f"  Stored: {stats['stored']}/{stats['districts']}")
        print(f"  Synthetic: {stats['synthetic']} ({stats['synthetic_pct']}%)")
        for issue in report["issues"]:
            print(f"  ! {issue}")
        all_valid = all_valid and report["valid"]

    print("\n" + "=" * 60 + "\n")
    return all_valid


def parse_periods(args: list[str]) -> list[str]:
    if "--history" in args:
        idx = args.index("--history")
        count = int(args[idx + 1]) if idx + 1 < len(args) and args[idx + 1].isdigit() else 12
        return [months_ago(date.today(), i) for i in range(count)]

    periods = [a for a in args if not a.startswith("-")]
    for p in periods:
        validate_period(p)
    return periods or [months_ago(date.today(), 0)]


def main():
    args = sys.argv[1:]

    try:
        periods = parse_periods(args)
    except ValidationError as e:
        print(e.message)
        print(__doc__)
        sys.exit(1)

    container = Container()
    try:
        if "--validate" in args:
            sys.exit(0 if print_report(validate_all(container, periods)) else 1)

        if READ_ONLY_DB:
            logger.warning("READ_ONLY_DB is set; results will not be stored")

        force = "--force" in args or "-f" in args
        logger.info("Refreshing periods: {}{}", ", ".join(periods), " [FORCE]" if force else "")
        for result in refresh_all(container, periods, force=force):
            logger.info(
                "{}: {} upstream, {} synthetic, {} failed",
                result["period"],
                result["upstream"],
                result["synthetic"],
                len(result["failed"]),
            )

        logger.info("Running validation...")
        print_report(validate_all(container, periods))
    finally:
        container.close()


if __name__ == "__main__":
    main()
