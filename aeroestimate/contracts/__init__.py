"""AeroEstimate data contracts: Pydantic v2 models for trip estimation.

Data authority
--------------

**Firestore** (shared cache, keyed by normalized aircraft identity):
- ``SpecsCacheEntry``: ``/aircraft_specs_cache/{AircraftKey.document_id()}``

**Airport directory** (reference data loaded once per process):
- ``Airport``: OurAirports CSV rows plus operator price overlays

Calculated (never persisted)
----------------------------
- ``PerformanceEstimate``: profile-specific speed and fuel burn
- ``FlightEstimateResult``: full trip estimate with confidence and
  uncertainty intervals
- ``WindAloft``: wind provider payload
"""

from aeroestimate.contracts.enums import (
    ConfidenceLevel,
    EngineType,
    FlightProfile,
    FuelType,
    PerformanceMethod,
    SpecSourceType,
)
from aeroestimate.contracts.common import FirestoreModel, utc_now
from aeroestimate.contracts.result import ServiceError, ServiceResult
from aeroestimate.contracts.specs import (
    AircraftKey,
    AircraftSpecs,
    CruiseAltitudeSpecs,
    CruiseSpeedSpecs,
    FuelBurnSpecs,
    SpecMeasurement,
    SpecSource,
    SpecsCacheEntry,
)
from aeroestimate.contracts.airport import Airport
from aeroestimate.contracts.weather import WindAloft
from aeroestimate.contracts.estimate import (
    AircraftSuggestion,
    ClimbPhase,
    CostBreakdown,
    CruisePhase,
    EstimateUncertainty,
    FlightEstimateRequest,
    FlightEstimateResult,
    FlightPhases,
    PerformanceEstimate,
    PhaseEstimate,
    SelectedCruiseSpeed,
    SelectedFuelBurn,
    SelectedRateOfClimb,
    UncertaintyInterval,
)

__all__ = [
    # Enums
    "ConfidenceLevel",
    "EngineType",
    "FlightProfile",
    "FuelType",
    "PerformanceMethod",
    "SpecSourceType",
    # Common
    "FirestoreModel",
    "utc_now",
    # Result
    "ServiceError",
    "ServiceResult",
    # Specs
    "AircraftKey",
    "AircraftSpecs",
    "CruiseAltitudeSpecs",
    "CruiseSpeedSpecs",
    "FuelBurnSpecs",
    "SpecMeasurement",
    "SpecSource",
    "SpecsCacheEntry",
    # Reference data
    "Airport",
    "WindAloft",
    # Estimates
    "AircraftSuggestion",
    "ClimbPhase",
    "CostBreakdown",
    "CruisePhase",
    "EstimateUncertainty",
    "FlightEstimateRequest",
    "FlightEstimateResult",
    "FlightPhases",
    "PerformanceEstimate",
    "PhaseEstimate",
    "SelectedCruiseSpeed",
    "SelectedFuelBurn",
    "SelectedRateOfClimb",
    "UncertaintyInterval",
]
