"""Infer flight parameters from the route and passenger count."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from aeroestimate.config import DEFAULT_FUEL_PRICE
from aeroestimate.contracts.airport import Airport
from aeroestimate.contracts.enums import FlightProfile, FuelType
from aeroestimate.contracts.estimate import (
    AircraftSuggestion,
    FlightEstimateRequest,
    FlightEstimateResult,
)
from aeroestimate.contracts.specs import AircraftKey
from aeroestimate.services.estimate import flight_math
from aeroestimate.services.estimate.engine import FlightEstimateEngine

logger = logging.getLogger(__name__)

BAGGAGE_PER_PASSENGER_KG = 15
AUTO_TAXI_TIME_MIN = 10

# (upper distance bound NM, altitude ft), first match wins
ALTITUDE_TIERS: list[tuple[float, float]] = [
    (200, 6000),
    (500, 8000),
    (1000, 12000),
]
HIGH_ALTITUDE_FT = 18000

# (max passengers, upper distance bound NM, manufacturer, model, reason)
SUGGESTION_BRACKETS: list[tuple[int, float, str, str, str]] = [
    (4, 500, "Cessna", "172", "Economical single-engine for short trips"),
    (6, 800, "Beechcraft", "King Air C90", "Turboprop for medium-range trips"),
    (8, 1500, "Cessna", "Citation", "Light jet for longer trips"),
]
FALLBACK_SUGGESTION = AircraftSuggestion(
    manufacturer="Embraer",
    model="Phenom 300",
    reason="Jet for long trips or larger groups",
)


def infer_altitude_ft(distance_nm: float) -> float:
    for bound, altitude in ALTITUDE_TIERS:
        if distance_nm < bound:
            return altitude
    return HIGH_ALTITUDE_FT


def infer_profile(distance_nm: float, passengers: int) -> FlightProfile:
    if distance_nm > 800 or passengers > 6:
        return FlightProfile.ECONOMIC
    if distance_nm < 200:
        return FlightProfile.FAST
    return FlightProfile.NORMAL


def suggest_aircraft(passengers: int, distance_nm: float) -> AircraftSuggestion:
    """First bracket the trip fits in; no specs lookup involved."""
    for max_pax, max_distance, manufacturer, model, reason in SUGGESTION_BRACKETS:
        if passengers <= max_pax and distance_nm < max_distance:
            return AircraftSuggestion(manufacturer=manufacturer, model=model, reason=reason)
    return FALLBACK_SUGGESTION


def _auto_fuel_price(origin: Airport, override: float | None) -> float:
    if override is not None:
        return override
    for fuel_type in (FuelType.AVGAS, FuelType.JET_A):
        price = origin.fuel_price(fuel_type)
        if price is not None:
            return price
    return DEFAULT_FUEL_PRICE


class AutoParameterEstimator:
    """Fill in altitude, profile, baggage and fuel price, then run the engine."""

    def __init__(
        self,
        engine: FlightEstimateEngine,
        today: Callable[[], date] = date.today,
    ):
        self._engine = engine
        self._today = today

    async def estimate(
        self,
        origin_code: str,
        dest_code: str,
        passengers: int,
        manufacturer: str,
        model: str,
        initial_fuel: float | None = None,
        fuel_price: float | None = None,
        variant: str | None = None,
        year: int | None = None,
    ) -> FlightEstimateResult:
        origin = await self._engine.find_airport(origin_code)
        dest = await self._engine.find_airport(dest_code)

        distance_nm = flight_math.haversine_nm(
            origin.latitude_deg, origin.longitude_deg,
            dest.latitude_deg, dest.longitude_deg,
        )
        altitude_ft = infer_altitude_ft(distance_nm)
        profile = infer_profile(distance_nm, passengers)
        logger.debug(
            "Auto parameters for %s->%s (%.0f NM, %d pax): %s at %.0f ft",
            origin.display_code, dest.display_code, distance_nm,
            passengers, profile.value, altitude_ft,
        )

        request = FlightEstimateRequest(
            origin=origin_code,
            destination=dest_code,
            aircraft=AircraftKey(
                manufacturer=manufacturer, model=model, variant=variant, year=year
            ),
            profile=profile,
            altitude_ft=altitude_ft,
            flight_date=self._today(),
            passengers=passengers,
            baggage=passengers * BAGGAGE_PER_PASSENGER_KG,
            initial_fuel_liters=initial_fuel,
            taxi_time_min=AUTO_TAXI_TIME_MIN,
            fuel_price_override=_auto_fuel_price(origin, fuel_price),
        )
        result = await self._engine.estimate(request)

        result.confidence_reasons.extend(
            [
                f"Origin: {origin.name} ({origin.display_code})",
                f"Destination: {dest.name} ({dest.display_code})",
                f"Inferred altitude: {altitude_ft:.0f} ft",
                f"Inferred profile: {profile.value}",
            ]
        )
        return result
