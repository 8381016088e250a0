"""Flight estimate request/result models and the performance selection DTO.

All models here are **calculated** and never stored in Firestore. A change
in any input (specs, wind, prices) produces a different estimate.
"""

from datetime import date, datetime
from typing import Self

from pydantic import Field, model_validator

from aeroestimate.contracts.common import FirestoreModel, utc_now
from aeroestimate.contracts.enums import (
    ConfidenceLevel,
    FlightProfile,
    PerformanceMethod,
)
from aeroestimate.contracts.specs import AircraftKey
from aeroestimate.contracts.weather import WindAloft


# ---------------------------------------------------------------------------
# Performance selection
# ---------------------------------------------------------------------------


class SelectedCruiseSpeed(FirestoreModel):
    value_kt: float = Field(..., gt=0)
    confidence: ConfidenceLevel
    method: PerformanceMethod


class SelectedFuelBurn(FirestoreModel):
    climb_lph: float = Field(..., gt=0)
    cruise_lph: float = Field(..., gt=0)
    descent_lph: float = Field(..., gt=0)
    confidence: ConfidenceLevel
    method: PerformanceMethod


class SelectedRateOfClimb(FirestoreModel):
    value_fpm: float
    confidence: ConfidenceLevel


class PerformanceEstimate(FirestoreModel):
    """Concrete performance values chosen for one flight profile."""

    cruise_speed: SelectedCruiseSpeed
    fuel_burn: SelectedFuelBurn
    rate_of_climb: SelectedRateOfClimb | None = None


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class FlightEstimateRequest(FirestoreModel):
    """Everything the engine needs to estimate a single trip."""

    origin: str = Field(..., min_length=2, max_length=8, description="ICAO/GPS/IATA/local code")
    destination: str = Field(..., min_length=2, max_length=8)
    aircraft: AircraftKey
    profile: FlightProfile = FlightProfile.NORMAL
    altitude_ft: float | None = Field(default=None, gt=0, le=51000)
    flight_date: date | None = None
    passengers: int | None = Field(default=None, ge=0)
    baggage: float | None = Field(default=None, ge=0)
    initial_fuel_liters: float | None = Field(default=None, ge=0)
    taxi_time_min: float = Field(default=10, ge=0)
    fuel_price_override: float | None = Field(default=None, gt=0)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class PhaseEstimate(FirestoreModel):
    time_min: float = Field(..., ge=0)
    fuel_liters: float = Field(..., ge=0)


class ClimbPhase(PhaseEstimate):
    altitude_ft: float


class CruisePhase(PhaseEstimate):
    altitude_ft: float
    tas_kt: float
    gs_kt: float
    wind_component_kt: float = Field(..., description="Positive = headwind")


class FlightPhases(FirestoreModel):
    taxi: PhaseEstimate
    climb: ClimbPhase
    cruise: CruisePhase
    descent: PhaseEstimate

    def total_fuel(self) -> float:
        return (
            self.taxi.fuel_liters
            + self.climb.fuel_liters
            + self.cruise.fuel_liters
            + self.descent.fuel_liters
        )


class CostBreakdown(FirestoreModel):
    fuel: float = Field(..., ge=0)
    fuel_tax: float = 0.0
    landing_fee: float = Field(..., ge=0)
    parking_fee: float = Field(..., ge=0)
    operational: float = Field(..., ge=0)
    total: float = Field(..., ge=0)


class UncertaintyInterval(FirestoreModel):
    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class EstimateUncertainty(FirestoreModel):
    """Intervals around flight time (h), total fuel (L) and total cost."""

    multiplier: float = Field(..., ge=0)
    time_h: UncertaintyInterval
    fuel_liters: UncertaintyInterval
    cost: UncertaintyInterval


class FlightEstimateResult(FirestoreModel):
    """Complete trip estimate.

    Invariants:
    - ``fuel_necessary_liters`` is the sum of the four phase fuels.
    - ``fuel_total_liters = fuel_necessary_liters + fuel_reserve_liters``.
    - every uncertainty interval contains its point value.
    """

    origin_name: str
    origin_code: str
    destination_name: str
    destination_code: str
    aircraft: AircraftKey

    # Inputs actually used
    profile: FlightProfile
    altitude_ft: float
    flight_date: date | None = None
    passengers: int | None = None
    baggage: float | None = None
    initial_fuel_liters: float | None = None

    distance_nm: float = Field(..., ge=0)
    phases: FlightPhases

    # Totals
    flight_time_h: float = Field(..., ge=0)
    block_time_h: float = Field(..., ge=0)
    fuel_necessary_liters: float = Field(..., ge=0)
    fuel_reserve_liters: float = Field(..., ge=0)
    fuel_total_liters: float = Field(..., ge=0)

    # Costs
    fuel_price: float = Field(..., ge=0)
    costs: CostBreakdown
    cost_per_hour: float
    cost_per_nm: float
    cost_per_km: float
    fuel_per_hour: float
    efficiency_nm_per_gal: float

    wind: WindAloft | None = None
    density_altitude_ft: int | None = Field(
        default=None, description="At cruise altitude, from the forecast temperature"
    )
    confidence: ConfidenceLevel
    confidence_score: int
    confidence_reasons: list[str] = Field(default_factory=list)
    uncertainty: EstimateUncertainty

    created_at: datetime = Field(default_factory=utc_now)


class AircraftSuggestion(FirestoreModel):
    manufacturer: str
    model: str
    reason: str
