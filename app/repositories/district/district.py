"""District repository - canonical district registry."""

from loguru import logger

from app.models.district import District
from app.repositories.base import BaseRepository


class DistrictRepository(BaseRepository):
    """Repository for seeded districts. Data never changes, so results are memoized."""

    def list_districts(self) -> list[District]:
        """All districts ordered by display name."""

        def fetch():
            rows = self.fetchdicts(
                "SELECT code, name, state_name, latitude, longitude FROM district ORDER BY name"
            )
            result = [District.from_dict(r) for r in rows]
            logger.debug("list_districts: {} districts", len(result))
            return result

        return self._cached("districts", fetch)

    def get(self, code: str) -> District | None:
        """District by code."""
        return next((d for d in self.list_districts() if d.code == code), None)
