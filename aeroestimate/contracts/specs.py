"""Aircraft performance specs and their cache entry.

Stored at: ``/aircraft_specs_cache/{AircraftKey.document_id()}``

Every performance figure is a ``SpecMeasurement`` that remembers where it
came from and how much it can be trusted, so that downstream estimates can
grade their own confidence.
"""

import hashlib
from datetime import datetime

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from aeroestimate.contracts.common import FirestoreModel, utc_now
from aeroestimate.contracts.enums import (
    ConfidenceLevel,
    EngineType,
    FuelType,
    SpecSourceType,
)


class AircraftKey(BaseModel):
    """Identity of an aircraft model; the cache key.

    Two keys are equal when their normalized tuples are equal, i.e. the
    comparison ignores case and surrounding whitespace.
    """

    manufacturer: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    variant: str | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)

    model_config = ConfigDict(frozen=True)

    def normalized(self) -> tuple[str, str, str, str]:
        return (
            self.manufacturer.strip().lower(),
            self.model.strip().lower(),
            (self.variant or "").strip().lower(),
            str(self.year) if self.year is not None else "",
        )

    def document_id(self) -> str:
        """Deterministic document ID: MD5(manufacturer:model:variant:year)[:16]."""
        raw = ":".join(self.normalized())
        return hashlib.md5(raw.encode()).hexdigest()[:16]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AircraftKey):
            return NotImplemented
        return self.normalized() == other.normalized()

    def __hash__(self) -> int:
        return hash(self.normalized())

    def __str__(self) -> str:
        parts = [self.manufacturer, self.model]
        if self.variant:
            parts.append(self.variant)
        if self.year is not None:
            parts.append(str(self.year))
        return " ".join(parts)


class SpecMeasurement(FirestoreModel):
    """A single performance figure with provenance."""

    value: float
    unit: str = Field(..., min_length=1, description="e.g. 'kt', 'L/h', 'fpm'")
    source: SpecSourceType
    collected_at: datetime = Field(default_factory=utc_now)
    confidence: ConfidenceLevel = ConfidenceLevel.MEDIUM
    notes: str | None = None


class SpecSource(FirestoreModel):
    """One entry of the append-only provenance log."""

    type: SpecSourceType
    collected_at: datetime = Field(default_factory=utc_now)
    reference: str | None = Field(default=None, description="URL or document title")


class _PositiveGroup(FirestoreModel):
    """Spec group whose figures feed divisions and must stay above zero."""

    @model_validator(mode="after")
    def validate_positive(self) -> Self:
        for name in type(self).model_fields:
            measurement = getattr(self, name)
            if measurement is not None and measurement.value <= 0:
                raise ValueError(f"{name} must be greater than 0, got {measurement.value}")
        return self


class CruiseSpeedSpecs(_PositiveGroup):
    normal: SpecMeasurement | None = None
    economic: SpecMeasurement | None = None
    max: SpecMeasurement | None = None


class FuelBurnSpecs(_PositiveGroup):
    climb: SpecMeasurement | None = None
    cruise: SpecMeasurement | None = None
    descent: SpecMeasurement | None = None
    idle: SpecMeasurement | None = None


class CruiseAltitudeSpecs(FirestoreModel):
    typical: SpecMeasurement | None = None
    max: SpecMeasurement | None = None


class AircraftSpecs(FirestoreModel):
    """Resolved performance specs for one aircraft model.

    ``is_complete`` and ``missing_fields`` describe the two critical groups
    an estimate cannot do without: a selectable cruise speed (normal or
    economic) and the cruise fuel burn. Call ``refresh_completeness()``
    after mutating either group.
    """

    manufacturer: str
    model: str
    variant: str | None = None
    year: int | None = None

    cruise_speed: CruiseSpeedSpecs = Field(default_factory=CruiseSpeedSpecs)
    fuel_burn: FuelBurnSpecs = Field(default_factory=FuelBurnSpecs)
    cruise_altitude: CruiseAltitudeSpecs = Field(default_factory=CruiseAltitudeSpecs)
    mtow: SpecMeasurement | None = None
    seats: SpecMeasurement | None = None
    range: SpecMeasurement | None = None
    engine_power: SpecMeasurement | None = None
    rate_of_climb: SpecMeasurement | None = None
    engine_type: EngineType | None = None
    fuel_type: FuelType | None = None

    is_complete: bool = False
    missing_fields: list[str] = Field(default_factory=list)
    sources: list[SpecSource] = Field(default_factory=list)
    last_updated: datetime = Field(default_factory=utc_now)

    @classmethod
    def empty(cls, key: AircraftKey) -> "AircraftSpecs":
        specs = cls(
            manufacturer=key.manufacturer,
            model=key.model,
            variant=key.variant,
            year=key.year,
        )
        specs.refresh_completeness()
        return specs

    def refresh_completeness(self) -> None:
        missing: list[str] = []
        if self.cruise_speed.normal is None and self.cruise_speed.economic is None:
            missing.append("cruise_speed")
        if self.fuel_burn.cruise is None:
            missing.append("fuel_burn")
        self.missing_fields = missing
        self.is_complete = not missing


class SpecsCacheEntry(FirestoreModel):
    """Cached resolution result for one ``AircraftKey``.

    ``stale_at`` of ``None`` marks a permanent entry (manual override).
    """

    key: AircraftKey
    specs: AircraftSpecs
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    stale_at: datetime | None = None

    @property
    def is_permanent(self) -> bool:
        return self.stale_at is None

    def is_fresh(self, now: datetime) -> bool:
        return self.stale_at is None or now <= self.stale_at
