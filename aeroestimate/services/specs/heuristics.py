"""Deterministic performance heuristics keyed on the model name.

The family table is evaluated top-down and the first keyword hit wins, so
row order is the priority: jets before turboprops before pistons (a
"Citation Twin" classifies as a jet).
"""

from __future__ import annotations

from dataclasses import dataclass

from aeroestimate.contracts.common import utc_now
from aeroestimate.contracts.enums import (
    ConfidenceLevel,
    EngineType,
    FuelType,
    SpecSourceType,
)
from aeroestimate.contracts.specs import (
    AircraftKey,
    AircraftSpecs,
    SpecMeasurement,
    SpecSource,
)

DEFAULT_CRUISE_SPEED_KT = 150.0
DEFAULT_FUEL_BURN_LPH = 100.0

# Power-derived rule: ~0.8 kt and ~0.3 L/h per rated horsepower
KT_PER_HP = 0.8
LPH_PER_HP = 0.3
MIN_POWER_SPEED_KT = 100.0
MAX_POWER_SPEED_KT = 500.0
MIN_POWER_FUEL_BURN_LPH = 30.0


@dataclass(frozen=True)
class AircraftFamily:
    name: str
    keywords: tuple[str, ...]
    cruise_speed_kt: float
    fuel_burn_lph: float
    engine_type: EngineType
    fuel_type: FuelType


FAMILIES: tuple[AircraftFamily, ...] = (
    AircraftFamily(
        "jet", ("jet", "citation", "phenom", "lear"),
        400.0, 450.0, EngineType.JET, FuelType.JET_A,
    ),
    AircraftFamily(
        "turboprop", ("king air", "tbm", "caravan", "quest"),
        260.0, 190.0, EngineType.TURBOPROP, FuelType.JET_A,
    ),
    AircraftFamily(
        "piston-single", ("172", "182", "cherokee", "archer"),
        120.0, 40.0, EngineType.PISTON, FuelType.AVGAS,
    ),
    AircraftFamily(
        "piston-twin", ("twin", "seneca", "baron", "aztec"),
        180.0, 120.0, EngineType.PISTON, FuelType.AVGAS,
    ),
)


def classify(model: str) -> AircraftFamily | None:
    """Return the first family whose keywords appear in *model*."""
    name = model.lower()
    for family in FAMILIES:
        if any(keyword in name for keyword in family.keywords):
            return family
    return None


def _engine_power_hp(specs: AircraftSpecs | None) -> float | None:
    if specs is None or specs.engine_power is None:
        return None
    return specs.engine_power.value or None


def estimate_cruise_speed(model: str, specs: AircraftSpecs | None = None) -> float:
    """Cruise TAS in knots from family, then engine power, then a default."""
    family = classify(model)
    if family is not None:
        return family.cruise_speed_kt
    hp = _engine_power_hp(specs)
    if hp is not None:
        return min(MAX_POWER_SPEED_KT, max(MIN_POWER_SPEED_KT, hp * KT_PER_HP))
    return DEFAULT_CRUISE_SPEED_KT


def estimate_fuel_burn(model: str, specs: AircraftSpecs | None = None) -> float:
    """Cruise fuel flow in L/h from family, then engine power, then a default."""
    family = classify(model)
    if family is not None:
        return family.fuel_burn_lph
    hp = _engine_power_hp(specs)
    if hp is not None:
        return max(MIN_POWER_FUEL_BURN_LPH, hp * LPH_PER_HP)
    return DEFAULT_FUEL_BURN_LPH


def heuristic_specs(key: AircraftKey, partial: AircraftSpecs | None = None) -> AircraftSpecs:
    """Build the heuristic tier's contribution for *key*.

    Only the groups that *partial* leaves empty are populated; the merge
    step would discard anything else anyway.
    """
    now = utc_now()
    specs = AircraftSpecs.empty(key)
    family = classify(key.model)

    if partial is None or (
        partial.cruise_speed.normal is None and partial.cruise_speed.economic is None
    ):
        specs.cruise_speed.normal = SpecMeasurement(
            value=estimate_cruise_speed(key.model, partial),
            unit="kt",
            source=SpecSourceType.HEURISTIC,
            collected_at=now,
            confidence=ConfidenceLevel.MEDIUM,
            notes="Estimated from aircraft type heuristics",
        )

    if partial is None or partial.fuel_burn.cruise is None:
        specs.fuel_burn.cruise = SpecMeasurement(
            value=estimate_fuel_burn(key.model, partial),
            unit="L/h",
            source=SpecSourceType.HEURISTIC,
            collected_at=now,
            confidence=ConfidenceLevel.LOW,
            notes="Estimated from aircraft type heuristics; needs validation",
        )

    if family is not None:
        specs.engine_type = family.engine_type
        specs.fuel_type = family.fuel_type

    specs.sources.append(SpecSource(type=SpecSourceType.HEURISTIC, collected_at=now))
    specs.last_updated = now
    specs.refresh_completeness()
    return specs
