"""Tests for district name matching."""

import pytest

from app.errors import NoMatchError
from app.models.district import ANDHRA_PRADESH_DISTRICTS
from app.services.performance.matcher import (
    DISTRICT_ALIASES,
    candidate_names,
    label_matches,
    match_records,
)
from datagov_client.mgnrega import DistrictRecordSchema

DISTRICTS = {d.code: d for d in ANDHRA_PRADESH_DISTRICTS}


def records(*names):
    return [DistrictRecordSchema(district_name=n) for n in names]


class TestCandidates:
    def test_name_forms(self):
        candidates = candidate_names(DISTRICTS["AP003"])
        assert candidates[:3] == ["east godavari", "eastgodavari", "east.godavari"]

    def test_aliases_deduplicated(self):
        candidates = candidate_names(DISTRICTS["AP013"])
        assert "y.s.r" in candidates
        assert "kadapa" in candidates
        assert len(candidates) == len(set(candidates))

    def test_no_aliases(self):
        assert candidate_names(DISTRICTS["AP001"]) == ["anantapur"]


class TestLabelMatches:
    def test_ysr_kadapa(self):
        assert label_matches("Y.S.R. Kadapa", DISTRICTS["AP013"])

    def test_ntr_alias(self):
        assert label_matches("NTR", DISTRICTS["AP004"])

    def test_case_insensitive_substring(self):
        assert label_matches("SRI POTTI SRIRAMULU NELLORE", DISTRICTS["AP007"])

    def test_unknown_district(self):
        assert not any(label_matches("Unknown District", d) for d in ANDHRA_PRADESH_DISTRICTS)

    def test_empty_label(self):
        assert not label_matches("", DISTRICTS["AP001"])
        assert not label_matches(None, DISTRICTS["AP001"])

    def test_custom_alias_table(self):
        aliases = {"AP001": ["ananthapuramu"]}
        assert label_matches("Ananthapuramu", DISTRICTS["AP001"], aliases)
        assert not label_matches("NTR", DISTRICTS["AP004"], aliases)


class TestMatchRecords:
    def test_filters_preserving_order(self):
        rows = records("Krishna", "Y.S.R. Kadapa", "Guntur", "YSR")
        matched = match_records(rows, DISTRICTS["AP013"])
        assert [r.district_name for r in matched] == ["Y.S.R. Kadapa", "YSR"]

    def test_no_match_lists_labels(self):
        rows = records("Unknown District", "Krishna", "Unknown District")
        with pytest.raises(NoMatchError) as exc:
            match_records(rows, DISTRICTS["AP009"])
        assert exc.value.district_code == "AP009"
        assert exc.value.labels == ["Unknown District", "Krishna"]
        assert "Srikakulam" in exc.value.message

    def test_empty_records(self):
        with pytest.raises(NoMatchError):
            match_records([], DISTRICTS["AP001"])

    def test_alias_table_is_data(self):
        assert all(code in DISTRICTS for code in DISTRICT_ALIASES)
