"""District name matching between upstream labels and canonical districts.

Upstream labels are free text ("Y.S.R. Kadapa", "NTR", "EAST GODAVARI").
A label matches a district when it contains any candidate form of the
canonical name or any curated alias as a substring. Matching only filters;
upstream order is preserved and callers take the first row.
"""

import re
from collections.abc import Iterable

from app.errors import NoMatchError
from app.models.district import District
from datagov_client.mgnrega import DistrictRecordSchema

# Abbreviations, renamings and spellings seen upstream, by district code
DISTRICT_ALIASES: dict[str, list[str]] = {
    "AP003": ["east godavari", "eastgodavari"],
    "AP004": ["ntr", "guntur"],
    "AP012": ["west godavari", "westgodavari"],
    "AP013": ["y.s.r", "ysr", "kadapa", "y s r"],
}

_WS = re.compile(r"\s+")


def candidate_names(district: District, aliases: dict[str, list[str]] = DISTRICT_ALIASES) -> list[str]:
    """Lowercase name, name without whitespace, name with dots for whitespace, plus aliases."""
    name = district.name.lower()
    forms = [name, _WS.sub("", name), _WS.sub(".", name)]
    forms += [alias.lower() for alias in aliases.get(district.code, [])]
    return list(dict.fromkeys(forms))


def label_matches(label: str | None, district: District, aliases: dict[str, list[str]] = DISTRICT_ALIASES) -> bool:
    """True if the upstream label contains any candidate for the district."""
    if not label:
        return False
    label = label.lower()
    return any(candidate in label for candidate in candidate_names(district, aliases))


def match_records(
    records: Iterable[DistrictRecordSchema],
    district: District,
    aliases: dict[str, list[str]] = DISTRICT_ALIASES,
) -> list[DistrictRecordSchema]:
    """Rows belonging to the district, in upstream order. Raises NoMatchError if none."""
    records = list(records)
    matched = [r for r in records if label_matches(r.district_name, district, aliases)]
    if not matched:
        labels = list(dict.fromkeys(r.district_name for r in records if r.district_name))
        raise NoMatchError(district.code, district.name, labels)
    return matched
