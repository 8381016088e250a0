"""Tiered, cached resolution of aircraft performance specs.

Resolution order for a key:

1. A cached entry that is permanent (manual override) or not yet stale is
   returned unchanged.
2. Otherwise the tiers run strictly in order (registry → scraping →
   heuristics), each bounded by a deadline, until the accumulated specs
   are complete. Results are folded through ``merge_specs`` so earlier
   tiers win and later tiers only fill gaps.
3. The merged specs are written back with ``stale_at = now + TTL``.

Concurrent resolutions of the same key are not serialized: the last write
wins, which is harmless because identical inputs merge to identical specs.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Sequence

from aeroestimate.config import DEFAULT_SPECS_TTL_DAYS, DEFAULT_TIER_TIMEOUT_S
from aeroestimate.contracts.common import utc_now
from aeroestimate.contracts.enums import SpecSourceType
from aeroestimate.contracts.specs import (
    AircraftKey,
    AircraftSpecs,
    SpecSource,
    SpecsCacheEntry,
)
from aeroestimate.errors import SpecsUnavailableError
from aeroestimate.persistence.repositories.specs_repo import SpecsCacheRepository
from aeroestimate.services.specs.merge import merge_specs, overrides_to_specs
from aeroestimate.services.specs.tiers import DEFAULT_TIERS, SpecsTier

logger = logging.getLogger(__name__)


class SpecsCache:
    """In-memory view of the specs collection with write-through saves.

    The whole collection is read once, on first use; afterwards reads are
    served from memory and every ``put`` is persisted immediately.
    """

    def __init__(self, repository: SpecsCacheRepository | None = None):
        self._repository = repository or SpecsCacheRepository()
        self._entries: dict[tuple[str, str, str, str], SpecsCacheEntry] = {}
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    async def load(self) -> None:
        if self._loaded:
            return
        for entry in await self._repository.list_all():
            self._entries[entry.key.normalized()] = entry
        self._loaded = True
        logger.info("Loaded %d cached aircraft specs", len(self._entries))

    async def get(self, key: AircraftKey) -> SpecsCacheEntry | None:
        await self.load()
        return self._entries.get(key.normalized())

    async def put(self, entry: SpecsCacheEntry) -> None:
        await self.load()
        self._entries[entry.key.normalized()] = entry
        await self._repository.save(entry)

    def __len__(self) -> int:
        return len(self._entries)


class SpecsResolver:
    """Resolve ``AircraftSpecs`` for an ``AircraftKey``."""

    def __init__(
        self,
        cache: SpecsCache | None = None,
        tiers: Sequence[SpecsTier] = DEFAULT_TIERS,
        *,
        ttl: timedelta = timedelta(days=DEFAULT_SPECS_TTL_DAYS),
        tier_timeout_s: float = DEFAULT_TIER_TIMEOUT_S,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._cache = cache or SpecsCache()
        self._tiers = tuple(tiers)
        self._ttl = ttl
        self._tier_timeout_s = tier_timeout_s
        self._clock = clock

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def resolve(self, key: AircraftKey) -> AircraftSpecs:
        """Return specs for *key*, refreshing the cache when stale or missing.

        The result is a copy: mutating it never touches the cache.
        """
        now = self._clock()
        cached = await self._cache.get(key)
        if cached is not None and cached.is_fresh(now):
            logger.debug("Specs cache hit for %s", key)
            return cached.specs.model_copy(deep=True)

        specs = await self._run_pipeline(key)
        if specs is None:
            if cached is not None:
                logger.warning("Specs pipeline produced nothing for %s; serving stale entry", key)
                return cached.specs.model_copy(deep=True)
            raise SpecsUnavailableError(key)

        entry = SpecsCacheEntry(
            key=key,
            specs=specs,
            created_at=cached.created_at if cached is not None else now,
            updated_at=now,
            stale_at=now + self._ttl,
        )
        await self._cache.put(entry)
        logger.info(
            "Resolved specs for %s (complete=%s, sources=%s)",
            key,
            specs.is_complete,
            [s.type for s in specs.sources],
        )
        return specs.model_copy(deep=True)

    async def get_cached(self, key: AircraftKey) -> SpecsCacheEntry | None:
        """Copy of the cached entry for *key*, fresh or stale, without resolving."""
        entry = await self._cache.get(key)
        return entry.model_copy(deep=True) if entry is not None else None

    async def set_manual_override(
        self,
        key: AircraftKey,
        overrides: dict[str, Any] | AircraftSpecs,
    ) -> SpecsCacheEntry:
        """Apply user-supplied values (typically from the POH) on top of the cache.

        Overrides win over every existing value, the entry becomes
        permanent (``stale_at = None``) and the tier pipeline is bypassed.
        """
        now = self._clock()
        existing = await self._cache.get(key)
        base = existing.specs if existing is not None else AircraftSpecs.empty(key)

        if isinstance(overrides, AircraftSpecs):
            override_specs = AircraftSpecs.model_validate(overrides.model_dump())
        else:
            override_specs = overrides_to_specs(key, overrides)

        specs = merge_specs(override_specs, base)
        specs.sources = [
            *base.sources,
            *override_specs.sources,
            SpecSource(type=SpecSourceType.MANUAL, collected_at=now),
        ]
        specs.last_updated = now
        specs.refresh_completeness()

        entry = SpecsCacheEntry(
            key=key,
            specs=specs,
            created_at=existing.created_at if existing is not None else now,
            updated_at=now,
            stale_at=None,
        )
        await self._cache.put(entry)
        logger.info("Manual specs override stored for %s", key)
        return entry.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    async def _run_pipeline(self, key: AircraftKey) -> AircraftSpecs | None:
        specs: AircraftSpecs | None = None
        for tier in self._tiers:
            if specs is not None and specs.is_complete:
                break
            result = await self._run_tier(tier, key, specs)
            specs = merge_specs(specs, result)
        return specs

    async def _run_tier(
        self,
        tier: SpecsTier,
        key: AircraftKey,
        partial: AircraftSpecs | None,
    ) -> AircraftSpecs | None:
        name = getattr(tier, "__name__", repr(tier))
        try:
            return await asyncio.wait_for(tier(key, partial), timeout=self._tier_timeout_s)
        except asyncio.TimeoutError:
            logger.warning("Specs tier %s timed out after %.1fs for %s", name, self._tier_timeout_s, key)
        except Exception as exc:
            logger.warning("Specs tier %s failed for %s: %s", name, key, exc)
        return None
