"""Pure flight-physics helpers used by the estimate engine.

Everything here is deterministic and side-effect free.
"""

from __future__ import annotations

import math

EARTH_RADIUS_NM = 3440.0

DEFAULT_CLIMB_RATE_FPM = 1000.0
DEFAULT_DESCENT_RATE_FPM = 500.0
FALLBACK_CLIMB_TIME_MIN = 15.0
MIN_CLIMB_TIME_MIN, MAX_CLIMB_TIME_MIN = 5.0, 30.0
MIN_DESCENT_TIME_MIN, MAX_DESCENT_TIME_MIN = 5.0, 20.0

# 3 NM per 1000 ft (3:1 profile) for both climb and descent
NM_PER_1000FT = 3.0


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def haversine_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in nautical miles."""
    la1, la2 = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = math.sin(dlat / 2) ** 2 + math.cos(la1) * math.cos(la2) * math.sin(dlon / 2) ** 2
    return EARTH_RADIUS_NM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def approximate_course_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Planar course approximation: ``atan2(Δlon, Δlat)`` in degrees.

    Not the great-circle initial bearing: it ignores meridian convergence
    and returns values in (-180, 180]. Wind components and therefore
    confidence outputs are calibrated against this approximation.
    """
    return math.degrees(math.atan2(lon2 - lon1, lat2 - lat1))


def wind_component_kt(wind_speed_kt: float, wind_direction_deg: float, course_deg: float) -> float:
    """Headwind component along the course; negative means tailwind."""
    return wind_speed_kt * math.cos(math.radians(wind_direction_deg - course_deg))


def climb_time_min(altitude_ft: float, climb_rate_fpm: float | None = None) -> float:
    rate = climb_rate_fpm or DEFAULT_CLIMB_RATE_FPM
    if rate <= 0:
        return FALLBACK_CLIMB_TIME_MIN
    return clamp(altitude_ft / rate, MIN_CLIMB_TIME_MIN, MAX_CLIMB_TIME_MIN)


def descent_time_min(altitude_ft: float, descent_rate_fpm: float = DEFAULT_DESCENT_RATE_FPM) -> float:
    return clamp(altitude_ft / descent_rate_fpm, MIN_DESCENT_TIME_MIN, MAX_DESCENT_TIME_MIN)


def transition_distance_nm(altitude_ft: float) -> float:
    """Horizontal distance covered while climbing to (or descending from) altitude."""
    return (altitude_ft / 1000.0) * NM_PER_1000FT


def safe_div(numerator: float, denominator: float) -> float:
    """Division that yields 0 instead of raising or going infinite."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator
