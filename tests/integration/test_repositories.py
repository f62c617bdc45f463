"""Tests for DuckDB-backed repositories."""

from dataclasses import replace
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from app.errors import PersistenceError
from app.models.district import ANDHRA_PRADESH_DISTRICTS
from app.repositories import CacheRepository, DistrictRepository, PerformanceRepository, close_db
from app.services.performance.synthetic import generate_bundle

GUNTUR = ANDHRA_PRADESH_DISTRICTS[3]
KRISHNA = ANDHRA_PRADESH_DISTRICTS[4]


def bundle(district=GUNTUR, period="2024-03"):
    return replace(generate_bundle(district, period), last_updated=datetime(2024, 3, 20, 10, 30, 15, 123456))


class TestDatabaseInit:
    def test_creates_file_and_parents(self, tmp_path):
        path = str(tmp_path / "nested" / "dir" / "test.duckdb")
        DistrictRepository(path, read_only=False)
        assert Path(path).exists()
        close_db(path)

    def test_read_only_creates_empty_db(self, db_path):
        repo = DistrictRepository(db_path, read_only=True)
        assert len(repo.list_districts()) == 13


class TestDistrictRepository:
    def test_seeded_and_sorted(self, db_path):
        districts = DistrictRepository(db_path, read_only=False).list_districts()
        names = [d.name for d in districts]
        assert len(districts) == 13
        assert names == sorted(names)
        assert names[0] == "Anantapur"
        assert names[-1] == "YSR Kadapa"

    def test_seed_idempotent(self, db_path):
        DistrictRepository(db_path, read_only=False)
        close_db(db_path)
        assert len(DistrictRepository(db_path, read_only=False).list_districts()) == 13

    def test_get(self, db_path):
        repo = DistrictRepository(db_path, read_only=False)
        assert repo.get("AP013").name == "YSR Kadapa"
        assert repo.get("AP013").latitude == 14.4667
        assert repo.get("XX999") is None


class TestPerformanceRepository:
    def test_upsert_and_history(self, db_path):
        repo = PerformanceRepository(db_path, read_only=False)
        stored = bundle()
        repo.upsert(stored)
        assert repo.history("AP004", 12) == [stored]

    def test_upsert_replaces(self, db_path):
        repo = PerformanceRepository(db_path, read_only=False)
        repo.upsert(bundle())
        updated = replace(bundle(), total_households=1, performance_score=60)
        repo.upsert(updated)

        rows = repo.history("AP004", 12)
        assert len(rows) == 1
        assert rows[0].total_households == 1

    def test_last_write_wins(self, db_path):
        repo = PerformanceRepository(db_path, read_only=False)
        for households in (100, 200, 300):
            repo.upsert(replace(bundle(), total_households=households))
        repo.upsert_many([replace(bundle(), total_households=400)])

        rows = repo.history("AP004", 12)
        assert len(rows) == 1
        assert rows[0].total_households == 400
        assert repo.fetchone("SELECT COUNT(*) FROM performance")[0] == 1

    def test_history_newest_first_with_limit(self, db_path):
        repo = PerformanceRepository(db_path, read_only=False)
        repo.upsert_many([bundle(period=p) for p in ("2024-01", "2023-11", "2024-03", "2023-12")])

        rows = repo.history("AP004", 3)
        assert [r.period for r in rows] == ["2024-03", "2024-01", "2023-12"]

    def test_by_period(self, db_path):
        repo = PerformanceRepository(db_path, read_only=False)
        repo.upsert_many([bundle(GUNTUR), bundle(KRISHNA), bundle(KRISHNA, "2024-02")])

        rows = repo.by_period(["AP004", "AP005", "AP001"], "2024-03")
        assert [r.district_code for r in rows] == ["AP004", "AP005"]
        assert repo.by_period([], "2024-03") == []

    def test_read_only_noop(self, db_path):
        PerformanceRepository(db_path, read_only=False).upsert(bundle(period="2024-01"))
        close_db(db_path)

        repo = PerformanceRepository(db_path, read_only=True)
        repo.upsert(bundle())
        repo.upsert_many([bundle(KRISHNA)])
        assert [r.period for r in repo.history("AP004", 12)] == ["2024-01"]
        assert repo.history("AP005", 12) == []


class TestCacheRepository:
    def test_set_get(self, db_path):
        repo = CacheRepository(db_path, read_only=False)
        stored = bundle()
        repo.set("district_AP004_2024-03", stored, timedelta(hours=6))
        assert repo.get("district_AP004_2024-03") == stored

    def test_missing(self, db_path):
        assert CacheRepository(db_path, read_only=False).get("nope") is None

    def test_expired_is_absent(self, db_path):
        repo = CacheRepository(db_path, read_only=False)
        repo.set("k", bundle(), timedelta(seconds=-1))
        assert repo.get("k") is None

    def test_overwrite(self, db_path):
        repo = CacheRepository(db_path, read_only=False)
        repo.set("k", bundle(), timedelta(seconds=-1))
        repo.set("k", bundle(KRISHNA), timedelta(hours=1))
        assert repo.get("k").district_code == "AP005"

    def test_repeated_set_last_write_wins(self, db_path):
        repo = CacheRepository(db_path, read_only=False)
        for households in (100, 200, 300):
            repo.set("k", replace(bundle(), total_households=households), timedelta(hours=1))

        assert repo.get("k").total_households == 300
        assert repo.fetchone("SELECT COUNT(*) FROM api_cache")[0] == 1

    def test_corrupt_entry(self, db_path):
        repo = CacheRepository(db_path, read_only=False)
        repo.execute(
            "INSERT INTO api_cache VALUES (?, ?, ?, ?)",
            ["bad", "{not json", datetime.now() + timedelta(hours=1), datetime.now()],
        )
        with pytest.raises(PersistenceError):
            repo.get("bad")

    def test_unserializable(self, db_path):
        repo = CacheRepository(db_path, read_only=False)
        with pytest.raises(PersistenceError):
            repo.set("k", replace(bundle(), month=object()), timedelta(hours=1))

    def test_clear_prefix(self, db_path):
        repo = CacheRepository(db_path, read_only=False)
        repo.set("district_AP004_2024-03", bundle(), timedelta(hours=1))
        repo.set("district_AP005_2024-03", bundle(KRISHNA), timedelta(hours=1))
        repo.clear("district_AP004")
        assert repo.get("district_AP004_2024-03") is None
        assert repo.get("district_AP005_2024-03") is not None
        repo.clear()
        assert repo.get("district_AP005_2024-03") is None

    def test_purge_expired(self, db_path):
        repo = CacheRepository(db_path, read_only=False)
        repo.set("old", bundle(), timedelta(seconds=-1))
        repo.set("new", bundle(), timedelta(hours=1))
        assert repo.purge_expired() == 1
        assert repo.fetchone("SELECT COUNT(*) FROM api_cache")[0] == 1

    def test_read_only_noop(self, db_path):
        CacheRepository(db_path, read_only=False).set("k", bundle(), timedelta(hours=1))
        close_db(db_path)

        repo = CacheRepository(db_path, read_only=True)
        repo.set("k2", bundle(KRISHNA), timedelta(hours=1))
        repo.clear()
        assert repo.purge_expired() == 0
        assert repo.get("k2") is None
        assert repo.get("k").district_code == "AP004"
