"""Repository for cached aircraft performance specs."""

from __future__ import annotations

from aeroestimate.contracts.specs import AircraftKey, SpecsCacheEntry
from aeroestimate.persistence.repositories.base import BaseRepository

COLLECTION = "aircraft_specs_cache"


class SpecsCacheRepository(BaseRepository[SpecsCacheEntry]):
    def __init__(self):
        super().__init__(SpecsCacheEntry, COLLECTION)

    async def get_by_key(self, key: AircraftKey) -> SpecsCacheEntry | None:
        return await self.get(key.document_id())

    async def save(self, entry: SpecsCacheEntry) -> None:
        await self.put(entry.key.document_id(), entry)
