"""Flight estimate engine: distance, wind, phases, fuel, cost, confidence.

Steps for one request:

1. Resolve aircraft specs and both airports.
2. Select profile-specific performance.
3. Fetch wind at the route midpoint (only when a flight date is given).
4. Split the trip into taxi / climb / cruise / descent and compute time
   and fuel per phase, plus a 45-minute reserve.
5. Price the trip, score confidence and derive uncertainty intervals.
"""

from __future__ import annotations

import logging

from aeroestimate.config import DEFAULT_FUEL_PRICE, DEFAULT_HOURLY_RATE
from aeroestimate.contracts.airport import Airport
from aeroestimate.contracts.enums import (
    ConfidenceLevel,
    FuelType,
    PerformanceMethod,
)
from aeroestimate.contracts.estimate import (
    ClimbPhase,
    CostBreakdown,
    CruisePhase,
    EstimateUncertainty,
    FlightEstimateRequest,
    FlightEstimateResult,
    FlightPhases,
    PerformanceEstimate,
    PhaseEstimate,
    UncertaintyInterval,
)
from aeroestimate.contracts.specs import AircraftSpecs
from aeroestimate.contracts.weather import WindAloft
from aeroestimate.errors import AirportNotFoundError
from aeroestimate.services.airports import AirportDirectory
from aeroestimate.services.estimate import flight_math
from aeroestimate.services.specs.resolver import SpecsResolver
from aeroestimate.services.specs.selector import PerformanceSelector
from aeroestimate.services.weather.wind import (
    NullWindProvider,
    WindProvider,
    density_altitude,
)

logger = logging.getLogger(__name__)

DEFAULT_ALTITUDE_FT = 10000.0
RESERVE_MINUTES = 45.0
TAXI_BURN_FACTOR = 0.3
KM_PER_NM = 1.852
LITERS_PER_GALLON = 3.785

# Confidence scoring
METHOD_POINTS = {
    PerformanceMethod.KNOWN.value: 3,
    PerformanceMethod.ML.value: 2,
    PerformanceMethod.HEURISTIC.value: 1,
}
WEATHER_POINTS = 2
COMPLETE_SPECS_POINTS = 2
INCOMPLETE_SPECS_POINTS = 1
HIGH_CONFIDENCE_SCORE = 8
MEDIUM_CONFIDENCE_SCORE = 5

UNCERTAINTY_BASE = {
    ConfidenceLevel.HIGH.value: 0.05,
    ConfidenceLevel.MEDIUM.value: 0.15,
    ConfidenceLevel.LOW.value: 0.30,
}
LOW_INPUT_PENALTY = 0.10

_METHOD_LABELS = {
    PerformanceMethod.ML.value: "ML model",
    PerformanceMethod.HEURISTIC.value: "heuristic",
}


def confidence_score(
    performance: PerformanceEstimate,
    has_weather: bool,
    specs_complete: bool,
) -> int:
    score = METHOD_POINTS[PerformanceMethod(performance.cruise_speed.method).value]
    score += METHOD_POINTS[PerformanceMethod(performance.fuel_burn.method).value]
    score += WEATHER_POINTS if has_weather else 0
    score += COMPLETE_SPECS_POINTS if specs_complete else INCOMPLETE_SPECS_POINTS
    return score


def confidence_level(score: int) -> ConfidenceLevel:
    if score >= HIGH_CONFIDENCE_SCORE:
        return ConfidenceLevel.HIGH
    if score >= MEDIUM_CONFIDENCE_SCORE:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def confidence_reasons(
    performance: PerformanceEstimate,
    wind: WindAloft | None,
    specs: AircraftSpecs,
) -> list[str]:
    reasons: list[str] = []
    speed_method = PerformanceMethod(performance.cruise_speed.method).value
    if speed_method in _METHOD_LABELS:
        reasons.append(f"Cruise speed estimated by {_METHOD_LABELS[speed_method]}")
    burn_method = PerformanceMethod(performance.fuel_burn.method).value
    if burn_method in _METHOD_LABELS:
        reasons.append(f"Fuel burn estimated by {_METHOD_LABELS[burn_method]}")
    if wind is None:
        reasons.append("Wind data not available; assuming zero wind")
    if not specs.is_complete:
        reasons.append(f"Missing spec fields: {', '.join(specs.missing_fields)}")
    return reasons


def uncertainty_multiplier(level: ConfidenceLevel, performance: PerformanceEstimate) -> float:
    multiplier = UNCERTAINTY_BASE[ConfidenceLevel(level).value]
    if ConfidenceLevel(performance.cruise_speed.confidence) == ConfidenceLevel.LOW:
        multiplier += LOW_INPUT_PENALTY
    if ConfidenceLevel(performance.fuel_burn.confidence) == ConfidenceLevel.LOW:
        multiplier += LOW_INPUT_PENALTY
    return multiplier


def interval(point: float, multiplier: float) -> UncertaintyInterval:
    return UncertaintyInterval(
        min=max(0.0, point * (1 - multiplier)),
        max=max(0.0, point * (1 + multiplier)),
    )


class FlightEstimateEngine:
    """Compute a ``FlightEstimateResult`` for a ``FlightEstimateRequest``."""

    def __init__(
        self,
        resolver: SpecsResolver,
        airports: AirportDirectory,
        wind_provider: WindProvider | None = None,
        selector: PerformanceSelector | None = None,
        *,
        default_fuel_price: float = DEFAULT_FUEL_PRICE,
        hourly_rate: float = DEFAULT_HOURLY_RATE,
    ):
        self._resolver = resolver
        self._airports = airports
        self._wind_provider = wind_provider or NullWindProvider()
        self._selector = selector or PerformanceSelector()
        self._default_fuel_price = default_fuel_price
        self._hourly_rate = hourly_rate

    @property
    def airports(self) -> AirportDirectory:
        return self._airports

    async def find_airport(self, code: str) -> Airport:
        """Look up *code* after making sure the directory is loaded."""
        await self._airports.load_airports()
        airport = self._airports.find_by_code(code)
        if airport is None:
            raise AirportNotFoundError(code)
        return airport

    async def estimate(self, request: FlightEstimateRequest) -> FlightEstimateResult:
        origin = await self.find_airport(request.origin)
        dest = await self.find_airport(request.destination)

        specs = await self._resolver.resolve(request.aircraft)
        performance = self._selector.select(specs, request.profile)

        distance_nm = flight_math.haversine_nm(
            origin.latitude_deg, origin.longitude_deg,
            dest.latitude_deg, dest.longitude_deg,
        )

        altitude_ft = request.altitude_ft
        if altitude_ft is None and specs.cruise_altitude.typical is not None:
            altitude_ft = specs.cruise_altitude.typical.value
        if altitude_ft is None:
            altitude_ft = DEFAULT_ALTITUDE_FT

        wind, wind_component = await self._wind(request, origin, dest, altitude_ft)

        # --- Phases -------------------------------------------------------
        tas_kt = performance.cruise_speed.value_kt
        gs_kt = tas_kt - wind_component
        burn = performance.fuel_burn
        taxi_min = request.taxi_time_min

        climb_rate = performance.rate_of_climb.value_fpm if performance.rate_of_climb else None
        climb_min = flight_math.climb_time_min(altitude_ft, climb_rate)
        descent_min = flight_math.descent_time_min(altitude_ft)

        transition_nm = flight_math.transition_distance_nm(altitude_ft)
        cruise_nm = max(0.0, distance_nm - 2 * transition_nm)
        cruise_h = flight_math.safe_div(cruise_nm, gs_kt)

        flight_time_h = (climb_min + cruise_h * 60 + descent_min) / 60
        block_time_h = flight_time_h + taxi_min / 60

        phases = FlightPhases(
            taxi=PhaseEstimate(
                time_min=taxi_min,
                fuel_liters=(taxi_min / 60) * burn.cruise_lph * TAXI_BURN_FACTOR,
            ),
            climb=ClimbPhase(
                time_min=climb_min,
                fuel_liters=(climb_min / 60) * burn.climb_lph,
                altitude_ft=altitude_ft,
            ),
            cruise=CruisePhase(
                time_min=cruise_h * 60,
                fuel_liters=cruise_h * burn.cruise_lph,
                altitude_ft=altitude_ft,
                tas_kt=tas_kt,
                gs_kt=gs_kt,
                wind_component_kt=wind_component,
            ),
            descent=PhaseEstimate(
                time_min=descent_min,
                fuel_liters=(descent_min / 60) * burn.descent_lph,
            ),
        )

        fuel_necessary = phases.total_fuel()
        fuel_reserve = (RESERVE_MINUTES / 60) * burn.cruise_lph
        fuel_total = fuel_necessary + fuel_reserve

        density_altitude_ft = None
        if wind is not None and wind.temperature_c is not None:
            density_altitude_ft = density_altitude(altitude_ft, wind.temperature_c)

        # --- Costs --------------------------------------------------------
        fuel_price = self._fuel_price(request, origin, specs)
        cost_fuel = fuel_total * fuel_price
        landing = (origin.landing_fee or 0.0) + (dest.landing_fee or 0.0)
        parking = (origin.parking_fee or 0.0) + (dest.parking_fee or 0.0)
        operational = block_time_h * self._hourly_rate
        cost_total = cost_fuel + landing + parking + operational
        costs = CostBreakdown(
            fuel=cost_fuel,
            landing_fee=landing,
            parking_fee=parking,
            operational=operational,
            total=cost_total,
        )
        cost_per_nm = flight_math.safe_div(cost_total, distance_nm)

        # --- Confidence & uncertainty -------------------------------------
        score = confidence_score(performance, wind is not None, specs.is_complete)
        level = confidence_level(score)
        multiplier = uncertainty_multiplier(level, performance)

        logger.debug(
            "Estimate %s->%s: %.1f NM, %.2f h, %.1f L, confidence %s (%d)",
            origin.display_code, dest.display_code, distance_nm,
            flight_time_h, fuel_total, level.value, score,
        )

        return FlightEstimateResult(
            origin_name=origin.name,
            origin_code=origin.display_code,
            destination_name=dest.name,
            destination_code=dest.display_code,
            aircraft=request.aircraft,
            profile=request.profile,
            altitude_ft=altitude_ft,
            flight_date=request.flight_date,
            passengers=request.passengers,
            baggage=request.baggage,
            initial_fuel_liters=request.initial_fuel_liters,
            distance_nm=distance_nm,
            phases=phases,
            flight_time_h=flight_time_h,
            block_time_h=block_time_h,
            fuel_necessary_liters=fuel_necessary,
            fuel_reserve_liters=fuel_reserve,
            fuel_total_liters=fuel_total,
            fuel_price=fuel_price,
            costs=costs,
            cost_per_hour=flight_math.safe_div(cost_total, block_time_h),
            cost_per_nm=cost_per_nm,
            cost_per_km=cost_per_nm * KM_PER_NM,
            fuel_per_hour=flight_math.safe_div(fuel_total, flight_time_h),
            efficiency_nm_per_gal=flight_math.safe_div(distance_nm, fuel_total / LITERS_PER_GALLON),
            wind=wind,
            density_altitude_ft=density_altitude_ft,
            confidence=level,
            confidence_score=score,
            confidence_reasons=confidence_reasons(performance, wind, specs),
            uncertainty=EstimateUncertainty(
                multiplier=multiplier,
                time_h=interval(flight_time_h, multiplier),
                fuel_liters=interval(fuel_total, multiplier),
                cost=interval(cost_total, multiplier),
            ),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _wind(
        self,
        request: FlightEstimateRequest,
        origin: Airport,
        dest: Airport,
        altitude_ft: float,
    ) -> tuple[WindAloft | None, float]:
        """Wind at the route midpoint and its headwind component."""
        if request.flight_date is None:
            return None, 0.0
        try:
            wind = await self._wind_provider.get_wind_at_altitude(
                (origin.latitude_deg + dest.latitude_deg) / 2,
                (origin.longitude_deg + dest.longitude_deg) / 2,
                altitude_ft,
                request.flight_date,
            )
        except Exception as exc:
            logger.warning("Wind lookup failed, assuming zero wind: %s", exc)
            return None, 0.0
        if wind is None:
            return None, 0.0

        course = flight_math.approximate_course_deg(
            origin.latitude_deg, origin.longitude_deg,
            dest.latitude_deg, dest.longitude_deg,
        )
        return wind, flight_math.wind_component_kt(
            wind.wind_speed_kt, wind.wind_direction_deg, course
        )

    def _fuel_price(
        self,
        request: FlightEstimateRequest,
        origin: Airport,
        specs: AircraftSpecs,
    ) -> float:
        if request.fuel_price_override is not None:
            return request.fuel_price_override
        published = origin.fuel_price(specs.fuel_type or FuelType.JET_A)
        if published is not None:
            return published
        return self._default_fuel_price
